"""Reply use cases."""

from .add_reply import AddReplyRequest, AddReplyUseCase
from .delete_reply import DeleteReplyUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteReplyUseCase",
]
