"""Comment and reply use cases."""

from .create_comment import CommentListResponse, CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "CommentListResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
