"""Tests for exceptions."""

import pytest

from ytmparse.exceptions import (
    APIError,
    AssemblyError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedStreamKindError,
    YTParseError,
)


class TestExceptionStatusCodes:
    """Tests for HTTP status codes on exceptions."""

    @pytest.mark.parametrize(
        ("error", "expected_status"),
        [
            (YTParseError("test message"), 500),
            (PathNotFoundError("a.b"), 502),
            (TypeMismatchError("a.b", "string", 1), 502),
            (UnsupportedStreamKindError("text/vtt"), 422),
            (AssemblyError("song", PathNotFoundError("a.b")), 502),
            (APIError("test message"), 502),
        ],
        ids=["base_error", "path_not_found", "type_mismatch", "unsupported", "assembly", "api_error"],
    )
    def test_exception_status_codes(self, error: YTParseError, expected_status: int) -> None:
        """Each exception type should have the correct HTTP status code."""
        assert error.status_code == expected_status

    def test_all_exceptions_inherit_from_base(self) -> None:
        for cls in (
            PathNotFoundError,
            TypeMismatchError,
            UnsupportedStreamKindError,
            AssemblyError,
            APIError,
        ):
            assert issubclass(cls, YTParseError)


class TestMessages:
    def test_path_not_found_message(self) -> None:
        error = PathNotFoundError("title.runs[0].text")
        assert error.message == "Required path not found: title.runs[0].text"

    @pytest.mark.parametrize(
        ("actual", "described"),
        [(None, "null"), ({}, "object"), ([], "array"), (3, "int 3")],
    )
    def test_type_mismatch_describes_actual(self, actual: object, described: str) -> None:
        error = TypeMismatchError("a", "string", actual)
        assert str(error) == f"Expected string at a, got {described}"

    def test_long_values_are_truncated(self) -> None:
        error = TypeMismatchError("a", "integer", "x" * 100)
        assert "..." in error.message
        assert len(error.message) < 100


class TestAssemblyError:
    def test_carries_cause_path_and_kind(self) -> None:
        cause = PathNotFoundError("menu.items[0]")
        error = AssemblyError("album", cause)

        assert error.kind == "album"
        assert error.path == "menu.items[0]"
        assert error.cause is cause
        assert error.index is None
        assert "album" in error.message

    def test_at_index_copies_with_position(self) -> None:
        cause = TypeMismatchError("x", "integer", "y")
        try:
            raise AssemblyError("song", cause) from cause
        except AssemblyError as e:
            annotated = e.at_index(4)

        assert annotated.index == 4
        assert annotated.cause is cause
        assert annotated.__cause__ is cause
        assert "(item 4)" in annotated.message

    def test_path_is_none_without_path_on_cause(self) -> None:
        error = AssemblyError("stream", UnsupportedStreamKindError("text/vtt"))
        assert error.path is None
