"""Post domain service."""

from uuid import uuid4

import logfire

from threadly.config import ContentSettings
from threadly.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PayloadTooLargeError,
    ValidationError,
)
from threadly.domain.model.common import utc_now
from threadly.domain.model.post import Post
from threadly.domain.model.vote import initial_votes
from threadly.domain.repository import PostRepository, PostSortOrder
from threadly.domain.value import (
    ImageSubmission,
    PostId,
    PostType,
    SubredditId,
    UserId,
)
from threadly.domain.value.common import ValueObject
from threadly.domain.value.validation import is_valid_url

from .base import Service
from .ranking_service import RankingService
from .subreddit_service import SubredditService
from .user_service import UserService


class Submission(ValueObject):
    """Validated submission fields of a post. Only the field matching the
    post type is set."""

    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: ImageSubmission | None = None


class PostPage(ValueObject):
    """One page of a post listing."""

    posts: list[Post]
    total: int
    page: int
    limit: int
    next: int | None = None
    previous: int | None = None


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_service: UserService,
        subreddit_service: SubredditService,
        ranking_service: RankingService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_service: User domain service
            subreddit_service: Subreddit domain service
            ranking_service: Ranking domain service
            content_settings: Content size limits and page sizes
        """
        self.post_repository = post_repository
        self.user_service = user_service
        self.subreddit_service = subreddit_service
        self.ranking_service = ranking_service
        self.content_settings = content_settings

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id), version=saved.version)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post with its comment tree

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post found", post_id=str(post_id), title=post.title)
            return post

    async def list_posts(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        subreddit_id: SubredditId | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> PostPage:
        """List posts, one page at a time.

        Page numbers below 1 are treated as 1; limit is clamped to
        1..max_page_size.

        Args:
            sort: Sort order
            subreddit_id: Restrict to one subreddit
            page: 1-based page number
            limit: Page size, default page size if None

        Returns:
            The requested page with links to its neighbours
        """
        if page < 1:
            page = 1
        if limit is None:
            limit = self.content_settings.default_page_size
        limit = max(1, min(limit, self.content_settings.max_page_size))

        with logfire.span(
            "post_service.list_posts",
            sort=sort.value,
            subreddit_id=str(subreddit_id) if subreddit_id else None,
            page=page,
            limit=limit,
        ):
            offset = (page - 1) * limit
            total = await self.post_repository.count(subreddit_id=subreddit_id)
            posts = await self.post_repository.find_all(
                sort=sort, subreddit_id=subreddit_id, limit=limit, offset=offset
            )

            logfire.info("Posts listed", count=len(posts), total=total)
            return PostPage(
                posts=posts,
                total=total,
                page=page,
                limit=limit,
                next=page + 1 if offset + limit < total else None,
                previous=page - 1 if page > 1 else None,
            )

    async def create_post(
        self,
        author_id: UserId,
        subreddit_id: SubredditId,
        post_type: PostType,
        title: str,
        text_submission: str | None = None,
        link_submission: str | None = None,
        image_submission: ImageSubmission | None = None,
    ) -> Post:
        """Create a post.

        The author starts out upvoting the post and earns one post karma.
        The post id is appended to the author's and the subreddit's post
        lists.

        Args:
            author_id: Authenticated author
            subreddit_id: Subreddit to post to
            post_type: Kind of submission
            title: Post title, trimmed before validation
            text_submission: Body of a Text post
            link_submission: URL of a Link post
            image_submission: Image of an Image post

        Returns:
            The saved post

        Raises:
            NotFoundError: If the author or the subreddit does not exist
            ValidationError: If the title or submission is invalid
            PayloadTooLargeError: If the text body is too long
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            subreddit_id=str(subreddit_id),
            post_type=post_type.value,
        ):
            author = await self.user_service.get_by_id(author_id)
            subreddit = await self.subreddit_service.get_by_id(subreddit_id)

            title = self._validate_title(title)
            submission = self._validate_submission(
                post_type, text_submission, link_submission, image_submission
            )

            now = utc_now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                post_type=post_type,
                text_submission=submission.text_submission,
                link_submission=submission.link_submission,
                image_submission=submission.image_submission,
                author_id=author.id,
                author_username=author.username.root,
                subreddit_id=subreddit.id,
                subreddit_name=subreddit.name.root,
                votes=initial_votes(author.id),
                points_count=1,
                vote_ratio=0,
                hot_algo=self.ranking_service.hot(1, now),
                controversial_algo=0,
                comment_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)

            author = author.with_karma(post_delta=1).model_copy(
                update={"posts": [*author.posts, saved.id], "updated_at": now}
            )
            await self.user_service.save(author)

            subreddit = subreddit.model_copy(
                update={"posts": [*subreddit.posts, saved.id], "updated_at": now}
            )
            await self.subreddit_service.save(subreddit)

            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author=author.username.root,
                subreddit=subreddit.name.root,
            )
            return saved

    async def update_post(
        self,
        post_id: PostId,
        requester_id: UserId,
        text_submission: str | None = None,
        link_submission: str | None = None,
        image_submission: ImageSubmission | None = None,
    ) -> Post:
        """Replace the submission of a post.

        The post type cannot change; the submission matching it is validated
        like on creation. An unchanged submission is not written.

        Args:
            post_id: Post to update
            requester_id: Authenticated user, must be the author
            text_submission: New body of a Text post
            link_submission: New URL of a Link post
            image_submission: New image of an Image post

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
            ValidationError: If the submission is invalid
            PayloadTooLargeError: If the text body is too long
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post_by_id(post_id)
            if post.author_id != requester_id:
                logfire.warn(
                    "Post update by non-author",
                    post_id=str(post_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(requester_id))

            submission = self._validate_submission(
                post.post_type, text_submission, link_submission, image_submission
            )
            current = Submission(
                text_submission=post.text_submission,
                link_submission=post.link_submission,
                image_submission=post.image_submission,
            )
            if submission == current:
                logfire.info("Post submission unchanged", post_id=str(post_id))
                return post

            updated = post.model_copy(
                update={
                    "text_submission": submission.text_submission,
                    "link_submission": submission.link_submission,
                    "image_submission": submission.image_submission,
                    "updated_at": utc_now(),
                }
            )
            return await self.save_post(updated)

    async def delete_post(self, post_id: PostId, requester_id: UserId) -> None:
        """Delete a post.

        The post id is removed from the author's and the subreddit's lists.
        Karma earned by the post is kept.

        Args:
            post_id: Post to delete
            requester_id: Authenticated user, must be the author

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post_by_id(post_id)
            if post.author_id != requester_id:
                logfire.warn(
                    "Post deletion by non-author",
                    post_id=str(post_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(requester_id))

            author = await self.user_service.get_by_id(post.author_id)
            await self.user_service.save(
                author.model_copy(
                    update={"posts": [p for p in author.posts if p != post_id]}
                )
            )

            subreddit = await self.subreddit_service.get_by_id(post.subreddit_id)
            await self.subreddit_service.save(
                subreddit.model_copy(
                    update={"posts": [p for p in subreddit.posts if p != post_id]}
                )
            )

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    def _validate_title(self, title: str) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Post title can't be empty.")
        max_length = self.content_settings.title_max_length
        if len(title) > max_length:
            raise ValidationError(
                f"Post title must be at most {max_length} characters, got {len(title)}."
            )
        return title

    def _validate_submission(
        self,
        post_type: PostType,
        text_submission: str | None,
        link_submission: str | None,
        image_submission: ImageSubmission | None,
    ) -> Submission:
        """Validate the submission matching the post type.

        Submission fields of other types are dropped.

        Raises:
            ValidationError: If the required field is missing or invalid
            PayloadTooLargeError: If the text body is too long
        """
        if post_type is PostType.TEXT:
            text = (text_submission or "").strip()
            if not text:
                raise ValidationError("Text body needed for post type 'Text'.")
            if len(text) > self.content_settings.text_max_length:
                raise PayloadTooLargeError("Text submission too long")
            return Submission(text_submission=text)

        if post_type is PostType.LINK:
            link = (link_submission or "").strip()
            if not is_valid_url(link):
                raise ValidationError("Valid URL needed for post type 'Link'.")
            return Submission(link_submission=link)

        if not image_submission or not image_submission.image_link:
            raise ValidationError("Image is needed for type 'Image'.")
        return Submission(image_submission=image_submission)
