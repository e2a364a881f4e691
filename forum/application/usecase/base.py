"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class BaseUseCase(ABC):
    """Base use case for orchestrating repository calls.

    ``execute`` is the sole entry point. It takes the raw payload, validates
    it before touching storage and lets domain errors propagate unchanged.
    """

    @abstractmethod
    async def execute(self, payload: Mapping[str, Any]) -> Any:
        pass
