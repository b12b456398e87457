"""Error codes and error handling utilities for theme loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, ClassVar


class ErrorCode(Enum):
    """Standardized error codes for theme operations."""

    # Storage errors
    FILE_NOT_FOUND = auto()
    FILE_TOO_LARGE = auto()
    FILE_UNREADABLE = auto()
    FILE_UNWRITABLE = auto()
    THEME_NOT_FOUND = auto()

    # Stylesheet errors
    MALFORMED_STYLESHEET = auto()
    IMPORT_NOT_RESOLVABLE = auto()
    CYCLIC_IMPORT = auto()
    INVALID_RULE = auto()
    UNKNOWN_COLOR_KEY = auto()

    # Operation errors
    INVALID_OPERATION = auto()
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The theme file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_TOO_LARGE: "The theme file is too large to be a valid theme.",
    ErrorCode.FILE_UNREADABLE: "The theme file could not be read. Check file permissions and encoding.",
    ErrorCode.FILE_UNWRITABLE: "The theme file could not be written.",
    ErrorCode.THEME_NOT_FOUND: "The theme does not exist.",

    ErrorCode.MALFORMED_STYLESHEET: "The theme file is not a valid stylesheet.",
    ErrorCode.IMPORT_NOT_RESOLVABLE: "An imported theme could not be found.",
    ErrorCode.CYCLIC_IMPORT: "Theme imports form a cycle.",
    ErrorCode.INVALID_RULE: "The theme contains an invalid rule.",
    ErrorCode.UNKNOWN_COLOR_KEY: "The theme refers to an unknown color name.",

    ErrorCode.INVALID_OPERATION: "This operation is not allowed for the selected theme.",
    ErrorCode.OPERATION_FAILED: "Theme operation failed. See details for more information.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "Pick another theme or restore the missing file.",
    ErrorCode.FILE_TOO_LARGE: "Theme files are limited to 1 MiB. The file may be corrupt.",
    ErrorCode.FILE_UNWRITABLE: "Check that the themes directory exists and is writable.",
    ErrorCode.THEME_NOT_FOUND: "Pick another theme in the settings.",
    ErrorCode.MALFORMED_STYLESHEET: "Fix the syntax errors listed in the details.",
    ErrorCode.IMPORT_NOT_RESOLVABLE: "Check the @import references of the theme.",
    ErrorCode.CYCLIC_IMPORT: "Remove one of the @import directives in the chain.",
    ErrorCode.INVALID_RULE: "Each rule must look like .ColorName { color: #rrggbb }.",
    ErrorCode.UNKNOWN_COLOR_KEY: "Check the spelling of the color name; names are case-sensitive.",
    ErrorCode.INVALID_OPERATION: "Built-in themes cannot be deleted. Save a copy as a user theme instead.",
}


@dataclass(eq=False)
class ThemeError(Exception):
    """Base exception for theme operations with error code and context."""

    code: ClassVar[ErrorCode] = ErrorCode.OPERATION_FAILED

    message: str = ""
    path: Path | None = None
    chain: tuple[Path, ...] = ()
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")
        if self.path is not None:
            self.path = Path(self.path)
        self.chain = tuple(Path(item) for item in self.chain)

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.chain:
            parts.append(f"\nImport chain: {' -> '.join(str(item) for item in self.chain)}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "chain": [str(item) for item in self.chain],
            "details": self.details,
            "suggestion": self.suggestion,
        }


class FileNotFoundThemeError(ThemeError):
    """A stylesheet file does not exist."""

    code = ErrorCode.FILE_NOT_FOUND


class FileUnreadableError(ThemeError):
    code = ErrorCode.FILE_UNREADABLE


class FileUnwritableError(ThemeError):
    """Saving or deleting a theme file failed at the file system."""

    code = ErrorCode.FILE_UNWRITABLE


class FileTooLargeError(ThemeError):
    """A stylesheet file exceeds the size ceiling; raised before parsing."""

    code = ErrorCode.FILE_TOO_LARGE


class ThemeNotFoundError(ThemeError):
    """No file exists at the location computed for a theme id."""

    code = ErrorCode.THEME_NOT_FOUND


class MalformedStylesheetError(ThemeError):
    """The CSS parser reported syntax errors; they are kept in ``details``."""

    code = ErrorCode.MALFORMED_STYLESHEET


class ImportNotResolvableError(ThemeError):
    code = ErrorCode.IMPORT_NOT_RESOLVABLE


class CyclicImportError(ThemeError):
    """An ``@import`` revisits a file already in the import chain."""

    code = ErrorCode.CYCLIC_IMPORT


class InvalidRuleError(ThemeError):
    """A rule is not a single-declaration class-selector color rule."""

    code = ErrorCode.INVALID_RULE


class UnknownColorKeyError(ThemeError):
    code = ErrorCode.UNKNOWN_COLOR_KEY


class InvalidThemeOperationError(ThemeError):
    code = ErrorCode.INVALID_OPERATION


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeError:
    """Classify a generic exception into a ThemeError with appropriate code."""
    if isinstance(exc, ThemeError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return FileNotFoundThemeError(path=path, details={"original": exc_str})
    if isinstance(exc, (PermissionError, UnicodeDecodeError)) or "permission denied" in exc_str:
        return FileUnreadableError(path=path, details={"original": exc_str})

    return ThemeError(
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        if error.chain:
            parts.append(f"\nImported via: {' -> '.join(item.name for item in error.chain)}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
