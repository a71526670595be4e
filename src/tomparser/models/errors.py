"""Parser error taxonomy."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ErrorCode(StrEnum):
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    INVALID_JSON = "INVALID_JSON"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    UNKNOWN_DATA_TYPE = "UNKNOWN_DATA_TYPE"
    MALFORMED_RELATIONSHIP = "MALFORMED_RELATIONSHIP"
    INVALID_PARTITION = "INVALID_PARTITION"
    UNKNOWN = "UNKNOWN"


class TomParserError(Exception):
    """Raised when a BIM document cannot be loaded or parsed.

    ``code`` is one of :class:`ErrorCode`; ``cause`` is the underlying
    exception, if any (also chained as ``__cause__`` when raised ``from`` it).
    """

    def __init__(
        self, code: ErrorCode, message: str, cause: BaseException | None = None
    ) -> None:
        self.code = ErrorCode(code)
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"TomParserError(code={self.code.value!r}, message={self.message!r})"

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class ErrorDetail(BaseModel):
    """Serialisable form of a :class:`TomParserError`."""

    code: ErrorCode
    message: str
