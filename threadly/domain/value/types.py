"""Domain value objects for Threadly.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import ClassVar

from threadly.domain.value.common import PublicName, ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote on a post, comment or reply."""

    UP = "up"
    DOWN = "down"

    @property
    def sign(self) -> int:
        """+1 for an upvote, -1 for a downvote."""
        return 1 if self is VoteDirection.UP else -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"
    REPLY = "reply"


class PostType(str, Enum):
    """Kind of submission a post carries.

    Each type requires exactly one matching submission field:
    - Text: text_submission
    - Link: link_submission
    - Image: image_submission
    """

    TEXT = "Text"
    LINK = "Link"
    IMAGE = "Image"


class Username(PublicName):
    """Public user name, 3-20 characters of letters, digits and underscores."""

    label: ClassVar[str] = "Username"


class SubredditName(PublicName):
    """Community name, e.g. 'python' in r/python."""

    label: ClassVar[str] = "Subreddit name"


class ImageSubmission(ValueObject):
    """Reference to an uploaded image.

    The upload itself happens elsewhere; a post only stores where the image
    lives and the storage id used to remove it.
    """

    image_link: str
    image_id: str
