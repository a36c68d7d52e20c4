"""Meeting book: the model owner command handlers and UI bindings call into."""
from typing import Iterable, Optional

from meetbuddy.core.logging import get_logger
from meetbuddy.domain.exceptions import require_non_null
from meetbuddy.domain.meeting import Meeting
from meetbuddy.domain.unique_meeting_list import MeetingListView, UniqueMeetingList

logger = get_logger(__name__)


class MeetingBook:
    """Wraps all meeting data at the book level.

    Duplicates are not allowed (by ``Meeting.is_same_meeting``).
    """

    def __init__(self, to_be_copied: Optional["MeetingBook"] = None) -> None:
        self._meetings = UniqueMeetingList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # list overwrite operations

    def set_meetings(self, meetings: Iterable[Meeting]) -> None:
        """Replaces the contents of the meeting list with ``meetings``.

        ``meetings`` must not contain duplicate meetings.
        """
        self._meetings.set_meetings(meetings)

    def reset_data(self, new_data: "MeetingBook") -> None:
        """Resets the existing data of this book with ``new_data``."""
        require_non_null(new_data=new_data)
        self._meetings.set_meetings(new_data._meetings)
        logger.info(f"Meeting book reset with {len(self._meetings)} meetings")

    # meeting-level operations

    def has_meeting(self, meeting: Meeting) -> bool:
        """Returns True if a meeting with the same identity as ``meeting`` exists."""
        return self._meetings.contains(meeting)

    def add_meeting(self, meeting: Meeting) -> None:
        """Adds a meeting to the book. The meeting must not already exist."""
        self._meetings.add(meeting)

    def set_meeting(self, target: Meeting, edited_meeting: Meeting) -> None:
        """Replaces ``target`` with ``edited_meeting``.

        ``target`` must exist in the book and the identity of ``edited_meeting``
        must not clash with another meeting in the book.
        """
        self._meetings.set_meeting(target, edited_meeting)

    def remove_meeting(self, key: Meeting) -> None:
        """Removes ``key`` from this book. ``key`` must exist in the book."""
        self._meetings.remove(key)

    @property
    def meetings(self) -> MeetingListView:
        return self._meetings.as_read_only_view()

    def __len__(self) -> int:
        return len(self._meetings)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, MeetingBook):
            return NotImplemented
        return self._meetings == other._meetings

    def __hash__(self) -> int:
        return hash(self._meetings)

    def __str__(self) -> str:
        return f"{len(self._meetings)} meetings"
