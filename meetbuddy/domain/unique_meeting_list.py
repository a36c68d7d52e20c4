"""List of meetings that enforces uniqueness between its elements.

A meeting is considered unique by comparing with ``Meeting.is_same_meeting``.
Adding and updating therefore use the weak notion of equality, so no two
meetings with the same name, start and terminate can coexist. Removal and
lookup of the meeting to update use full equality, so the exact meeting is
the one touched.

Supports a minimal set of list operations.
"""
from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, Union

from meetbuddy.core.logging import get_logger
from meetbuddy.domain.exceptions import (
    DuplicateMeetingError,
    MeetingNotFoundError,
    ReadOnlyViewError,
    require_non_null,
)
from meetbuddy.domain.meeting import Meeting

logger = get_logger(__name__)


def _require_meeting(**arguments) -> None:
    """Raise ``TypeError`` if any argument is None or not a ``Meeting``."""
    require_non_null(**arguments)
    for name, value in arguments.items():
        if not isinstance(value, Meeting):
            raise TypeError(f"{name} must be a Meeting, not {type(value).__name__}")


class MeetingListView(Sequence):
    """Live, read-only projection of a meeting list.

    Reads reflect later changes to the owning list; every write raises
    ``ReadOnlyViewError``.
    """

    def __init__(self, backing: List[Meeting]):
        self._backing = backing

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._backing[index])
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (MeetingListView, list, tuple)):
            return list(self._backing) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"MeetingListView({self._backing!r})"

    def __setitem__(self, index, value):
        raise ReadOnlyViewError("__setitem__")

    def __delitem__(self, index):
        raise ReadOnlyViewError("__delitem__")

    def __iadd__(self, other):
        raise ReadOnlyViewError("__iadd__")

    def append(self, meeting):
        raise ReadOnlyViewError("append")

    def extend(self, meetings):
        raise ReadOnlyViewError("extend")

    def insert(self, index, meeting):
        raise ReadOnlyViewError("insert")

    def remove(self, meeting):
        raise ReadOnlyViewError("remove")

    def pop(self, index=-1):
        raise ReadOnlyViewError("pop")

    def clear(self):
        raise ReadOnlyViewError("clear")

    def sort(self, *args, **kwargs):
        raise ReadOnlyViewError("sort")

    def reverse(self):
        raise ReadOnlyViewError("reverse")


class UniqueMeetingList:
    """Ordered collection of meetings in which no two are the same meeting.

    Every mutating operation either completes with the invariant intact or
    raises and leaves the list unchanged.

    Example:
        >>> meetings = UniqueMeetingList()
        >>> meetings.add(meeting)
        >>> meetings.contains(meeting)
        True
    """

    def __init__(self) -> None:
        # Only ever mutated in place; the view below wraps this exact list
        self._internal_list: List[Meeting] = []
        self._view = MeetingListView(self._internal_list)

    def contains(self, to_check: Meeting) -> bool:
        """Returns True if the list contains a meeting with the same identity as ``to_check``."""
        _require_meeting(to_check=to_check)
        return any(meeting.is_same_meeting(to_check) for meeting in self._internal_list)

    def __contains__(self, to_check: Meeting) -> bool:
        return self.contains(to_check)

    def add(self, to_add: Meeting) -> None:
        """Adds a meeting to the end of the list.

        Raises:
            TypeError: If ``to_add`` is None or not a meeting
            DuplicateMeetingError: If a meeting with the same identity exists
        """
        _require_meeting(to_add=to_add)
        if self.contains(to_add):
            logger.debug(
                "Rejected duplicate meeting",
                extra={"operation": "add", "meeting": str(to_add)}
            )
            raise DuplicateMeetingError()
        self._internal_list.append(to_add)
        logger.debug(
            "Meeting added",
            extra={"operation": "add", "meeting": str(to_add), "size": len(self._internal_list)}
        )

    def set_meeting(self, target: Meeting, edited_meeting: Meeting) -> None:
        """Replaces the meeting ``target`` in the list with ``edited_meeting``.

        ``target`` must be in the list (by full equality). The identity of
        ``edited_meeting`` must not be the same as another existing meeting.

        Raises:
            TypeError: If either argument is None or not a meeting
            MeetingNotFoundError: If ``target`` is not in the list
            DuplicateMeetingError: If the edit collides with another meeting
        """
        _require_meeting(target=target, edited_meeting=edited_meeting)

        index = self._index_of(target)
        if index is None:
            logger.debug(
                "Meeting to edit not found",
                extra={"operation": "set_meeting", "target": str(target)}
            )
            raise MeetingNotFoundError()

        if not self._internal_list[index].is_same_meeting(edited_meeting) and self.contains(edited_meeting):
            logger.debug(
                "Rejected edit colliding with another meeting",
                extra={"operation": "set_meeting", "target": str(target), "meeting": str(edited_meeting)}
            )
            raise DuplicateMeetingError()

        self._internal_list[index] = edited_meeting
        logger.debug(
            "Meeting replaced",
            extra={"operation": "set_meeting", "target": str(target), "meeting": str(edited_meeting)}
        )

    def remove(self, to_remove: Meeting) -> None:
        """Removes the meeting equal to ``to_remove`` from the list.

        Raises:
            TypeError: If ``to_remove`` is None or not a meeting
            MeetingNotFoundError: If no meeting in the list equals ``to_remove``
        """
        _require_meeting(to_remove=to_remove)

        index = self._index_of(to_remove)
        if index is None:
            logger.debug(
                "Meeting to remove not found",
                extra={"operation": "remove", "meeting": str(to_remove)}
            )
            raise MeetingNotFoundError()

        del self._internal_list[index]
        logger.debug(
            "Meeting removed",
            extra={"operation": "remove", "meeting": str(to_remove), "size": len(self._internal_list)}
        )

    def set_meetings(self, replacement: Union["UniqueMeetingList", Iterable[Meeting]]) -> None:
        """Replaces the contents of this list with ``replacement``.

        A ``UniqueMeetingList`` is copied as is. Any other iterable must not
        contain duplicate meetings.

        Raises:
            TypeError: If ``replacement`` or one of its elements is None or not a meeting
            DuplicateMeetingError: If ``replacement`` contains duplicate meetings
        """
        require_non_null(replacement=replacement)

        if isinstance(replacement, UniqueMeetingList):
            meetings = list(replacement._internal_list)
        else:
            meetings = list(replacement)
            for meeting in meetings:
                _require_meeting(meeting=meeting)
            if not self._meetings_are_unique(meetings):
                logger.debug(
                    "Rejected replacement containing duplicate meetings",
                    extra={"operation": "set_meetings", "size": len(meetings)}
                )
                raise DuplicateMeetingError()

        self._internal_list[:] = meetings
        logger.debug(
            "Meetings replaced",
            extra={"operation": "set_meetings", "size": len(meetings)}
        )

    def as_read_only_view(self) -> MeetingListView:
        """Returns the backing list as a live, read-only sequence."""
        return self._view

    def _index_of(self, meeting: Meeting) -> Optional[int]:
        for index, existing in enumerate(self._internal_list):
            if existing == meeting:
                return index
        return None

    @staticmethod
    def _meetings_are_unique(meetings: List[Meeting]) -> bool:
        """Returns True if ``meetings`` contains only unique meetings."""
        for i, first in enumerate(meetings):
            for second in meetings[i + 1:]:
                if first.is_same_meeting(second):
                    return False
        return True

    def __iter__(self) -> Iterator[Meeting]:
        return iter(list(self._internal_list))

    def __len__(self) -> int:
        return len(self._internal_list)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueMeetingList):
            return NotImplemented
        return self._internal_list == other._internal_list

    def __hash__(self) -> int:
        return hash(tuple(self._internal_list))

    def __repr__(self) -> str:
        return f"UniqueMeetingList({self._internal_list!r})"
