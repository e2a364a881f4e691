"""User entity.

Users are owned by the authentication service; the forum only reads them to
resolve usernames for display.
"""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class User(DomainModel):
    """User as seen by the forum."""

    id: UserId
    username: str
    fullname: Optional[str] = None
