"""Thread use cases."""

from .add_thread import AddThreadUseCase
from .get_detail_thread import GetDetailThread, GetDetailThreadUseCase

__all__ = [
    "AddThreadUseCase",
    "GetDetailThread",
    "GetDetailThreadUseCase",
]
