"""Custom exceptions for ytmparse.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""

from __future__ import annotations


class YTParseError(Exception):
    """Base exception for ytmparse.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PathNotFoundError(YTParseError):
    """A required path is absent from the response tree.

    Raised when a segment is missing, an index is out of bounds, or a
    segment tries to descend into a scalar. The tree is immutable, so
    retrying cannot change the outcome.

    Attributes:
        path: The exact path expression that failed to resolve.
    """

    status_code: int = 502  # Bad Gateway (upstream response shape)

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Required path not found: {path}")


class TypeMismatchError(YTParseError):
    """A node is present but holds the wrong kind of value.

    Usually means the upstream schema drifted.

    Attributes:
        path: Path of the offending node.
        expected: Name of the requested type or format.
        actual: Short description of the value found.
    """

    status_code: int = 502  # Bad Gateway (upstream response shape)

    def __init__(self, path: str, expected: str, actual: object) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} at {path}, got {_describe(actual)}")


class UnsupportedStreamKindError(YTParseError):
    """A format descriptor has a MIME major type other than audio or video."""

    status_code: int = 422  # Unprocessable Entity

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(
            f"Unsupported stream mime type: {mime_type!r}. "
            "Only audio and video are supported."
        )


class AssemblyError(YTParseError):
    """Failed to assemble an entity from a response tree.

    Wraps the underlying navigation or coercion error together with the
    entity kind and the failing path, so a captured response can be
    diagnosed without guessing which lookup broke.

    Attributes:
        kind: Entity kind under assembly (e.g. "album").
        path: Failing path expression, when known.
        cause: The original error.
        index: Position of the item in its list, for batch assembly.
    """

    status_code: int = 502  # Bad Gateway (upstream response shape)

    def __init__(
        self,
        kind: str,
        cause: YTParseError,
        index: int | None = None,
    ) -> None:
        self.kind = kind
        self.cause = cause
        self.path: str | None = getattr(cause, "path", None)
        self.index = index
        where = f" (item {index})" if index is not None else ""
        super().__init__(f"Failed to assemble {kind}{where}: {cause.message}")

    def at_index(self, index: int) -> AssemblyError:
        """Return a copy of this error annotated with a list position."""
        error = AssemblyError(self.kind, self.cause, index=index)
        error.__cause__ = self.__cause__
        return error


class APIError(YTParseError):
    """YouTube Music API error.

    Raised when the underlying transport request fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


def _describe(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    text = repr(value)
    if len(text) > 40:
        text = text[:37] + "..."
    return f"{type(value).__name__} {text}"
