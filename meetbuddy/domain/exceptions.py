"""Failure kinds raised by the meeting model.

Constraint violations surface as ``ValueError`` (pydantic's ``ValidationError``
is one) and missing arguments as ``TypeError``; the classes below cover the
collection-level rejections.
"""


class MeetingError(Exception):
    """Base class for meeting collection errors."""


class DuplicateMeetingError(MeetingError):
    """Operation would result in two meetings with the same identity."""

    def __init__(self, message: str = "Operation would result in duplicate meetings"):
        super().__init__(message)


class MeetingNotFoundError(MeetingError):
    """Targeted meeting is not present in the list."""

    def __init__(self, message: str = "The specified meeting could not be found"):
        super().__init__(message)


class ReadOnlyViewError(TypeError):
    """Attempt to modify a read-only view of a meeting list."""

    def __init__(self, operation: str):
        super().__init__(f"'{operation}' is not supported on a read-only meeting view")
        self.operation = operation


def require_non_null(**arguments) -> None:
    """Raise ``TypeError`` naming the first argument that is ``None``.

    Example:
        >>> require_non_null(target=target, edited=edited)
    """
    for name, value in arguments.items():
        if value is None:
            raise TypeError(f"{name} must not be None")
