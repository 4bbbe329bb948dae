"""Error types raised while generating a random gopher."""

from __future__ import annotations


class GopherError(RuntimeError):
    """Base class for every failure the generation pipeline reports."""


class NetworkError(GopherError):
    """Raised when an outbound call fails at transport level or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(GopherError):
    """Raised when the artwork catalog body cannot be parsed."""


class EmptyCategoryError(GopherError):
    """Raised when a catalog category has no selectable options."""

    def __init__(self, category_id: str) -> None:
        self.category_id = category_id
        super().__init__(f"category {category_id!r} has no images to choose from")


class ImageNotFoundError(GopherError):
    """Raised when the rendered page does not reference an image."""
