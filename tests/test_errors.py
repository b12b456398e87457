"""Tests for theme error types and user-facing formatting."""

from __future__ import annotations

from pathlib import Path

from themecascade.errors import (
    CyclicImportError,
    ErrorCode,
    FileNotFoundThemeError,
    FileUnreadableError,
    InvalidThemeOperationError,
    ThemeError,
    classify_exception,
    format_error_for_user,
)


def test_default_message_and_suggestion_from_code() -> None:
    error = InvalidThemeOperationError()

    assert error.code is ErrorCode.INVALID_OPERATION
    assert error.message
    assert "Built-in" in error.suggestion


def test_str_includes_file_chain_and_details() -> None:
    error = CyclicImportError(
        path=Path("/themes/b.css"),
        chain=("/themes/a.css", "/themes/b.css", "/themes/a.css"),
        details={"line": 1},
    )

    text = str(error)

    assert "File: /themes/b.css" in text
    assert "/themes/a.css -> /themes/b.css -> /themes/a.css" in text
    assert "line=1" in text
    assert all(isinstance(item, Path) for item in error.chain)


def test_to_dict() -> None:
    error = FileNotFoundThemeError(path=Path("/themes/a.css"))

    data = error.to_dict()

    assert data["code"] == "FILE_NOT_FOUND"
    assert data["path"] == str(Path("/themes/a.css"))
    assert data["chain"] == []


def test_theme_errors_are_exceptions() -> None:
    error = FileNotFoundThemeError(path=Path("a.css"))

    assert isinstance(error, ThemeError)
    assert isinstance(error, Exception)


def test_classify_exception() -> None:
    assert isinstance(classify_exception(FileNotFoundError("no such file")), FileNotFoundThemeError)
    assert isinstance(classify_exception(PermissionError("denied")), FileUnreadableError)
    generic = classify_exception(RuntimeError("boom"))
    assert generic.code is ErrorCode.OPERATION_FAILED
    assert "boom" in generic.message


def test_format_error_for_user() -> None:
    error = CyclicImportError(
        path=Path("/themes/b.css"),
        chain=(Path("/themes/a.css"), Path("/themes/b.css")),
    )

    text = format_error_for_user(error)

    assert "File: b.css" in text
    assert "Imported via: a.css -> b.css" in text
    assert error.suggestion in text


def test_format_generic_exception() -> None:
    assert "boom" in format_error_for_user(RuntimeError("boom"))
