"""Like use cases."""

from .like_comment import LikeCommentUseCase

__all__ = ["LikeCommentUseCase"]
