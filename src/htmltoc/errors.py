from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"
    INPUT_READ_FAILED = "INPUT_READ_FAILED"
    INPUT_DECODE_FAILED = "INPUT_DECODE_FAILED"


class HtmlTocError(Exception):
    """Raised for all expected failure conditions while loading a document.

    Caught by cli.main and reported on stderr with a non-zero exit status.
    The transform stages never raise it; they only see lines already loaded.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
            }
        }
