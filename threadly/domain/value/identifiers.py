"""Strongly typed identifiers for Threadly domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Aggregate identifiers
UserId = NewType("UserId", UUID)
SubredditId = NewType("SubredditId", UUID)
PostId = NewType("PostId", UUID)

# Identifiers of entities embedded in a post document
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)
