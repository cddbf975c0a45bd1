"""Domain error codes for statement computation."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PLAY_NOT_FOUND = "PLAY_NOT_FOUND"
    UNKNOWN_PLAY_GENRE = "UNKNOWN_PLAY_GENRE"
    INVALID_DATA = "INVALID_DATA"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PlayNotFoundError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.PLAY_NOT_FOUND,
            message=f"Play not found: {play_id}",
        )
        self.play_id = play_id


class UnknownPlayGenreError(DomainError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre: str, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_GENRE,
            message=f"unknown type: {genre} (play {play_id})",
        )
        self.genre = genre
        self.play_id = play_id


class InvalidDataError(DomainError):
    """Raised when plays or invoices cannot be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_DATA, message=detail)
