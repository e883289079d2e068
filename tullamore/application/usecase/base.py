"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def resource_location(base_url: str, *segments: str) -> str:
    """Build the absolute URL of a created resource.

    Args:
        base_url: Base URL of the incoming request (e.g. "http://localhost/")
        segments: Path segments, percent-encoded individually

    Returns:
        Absolute resource URL, e.g. "http://localhost/tag/Java"
    """
    path = "/".join(quote(segment, safe="") for segment in segments)
    return f"{base_url.rstrip('/')}/{path}"
