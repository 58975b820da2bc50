"""Domain layer DI providers."""

from dishka import Scope, provide

from threadly.config import AuthSettings, ContentSettings, RankingSettings
from threadly.domain.repository import (
    PostRepository,
    SubredditRepository,
    UserRepository,
)
from threadly.domain.service import (
    CommentService,
    JWTService,
    PostService,
    RankingService,
    SubredditService,
    UserService,
    VoteService,
)
from threadly.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_ranking_service(self, ranking_settings: RankingSettings) -> RankingService:
        """Provide ranking domain service (stateless)."""
        return RankingService(ranking_settings=ranking_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_subreddit_service(
        self, subreddit_repository: SubredditRepository
    ) -> SubredditService:
        """Provide subreddit domain service."""
        return SubredditService(subreddit_repository=subreddit_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        user_service: UserService,
        subreddit_service: SubredditService,
        ranking_service: RankingService,
        content_settings: ContentSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            user_service=user_service,
            subreddit_service=subreddit_service,
            ranking_service=ranking_service,
            content_settings=content_settings,
        )

    @provide
    def get_comment_service(
        self,
        post_service: PostService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            post_service=post_service,
            user_service=user_service,
            content_settings=content_settings,
        )

    @provide
    def get_vote_service(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        ranking_service: RankingService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            post_service=post_service,
            comment_service=comment_service,
            user_service=user_service,
            ranking_service=ranking_service,
        )
