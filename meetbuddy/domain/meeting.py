"""Meeting aggregate of the MeetBuddy model."""
from typing import ClassVar, FrozenSet, Iterable, List
from pydantic import BaseModel, model_validator

from meetbuddy.domain.date_time import DateTime
from meetbuddy.domain.exceptions import require_non_null
from meetbuddy.domain.values import Description, Name, Priority, Tag


class Meeting(BaseModel):
    """A meeting in MeetBuddy.

    Guarantees: details are present and not None, field values are validated,
    immutable. Editing a meeting means building a new one and swapping it into
    the list that owns the old one.

    Attributes:
        name: Meeting name (identity field)
        start: Start date time (identity field)
        terminate: Terminate date time (identity field)
        priority: Priority indicator
        description: Free-text description
        tags: Tags attached to the meeting
    """
    name: Name
    start: DateTime
    terminate: DateTime
    priority: Priority
    description: Description
    tags: FrozenSet[Tag]

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "The start date time of a meeting should be strictly earlier than the terminate date time."
    )

    class Config:
        frozen = True

    def __init__(
        self,
        name: Name,
        start: DateTime,
        terminate: DateTime,
        priority: Priority,
        description: Description,
        tags: Iterable[Tag],
    ):
        require_non_null(
            name=name,
            start=start,
            terminate=terminate,
            priority=priority,
            description=description,
            tags=tags,
        )
        # frozenset() copies, so later changes to the caller's set do not leak in
        super().__init__(
            name=name,
            start=start,
            terminate=terminate,
            priority=priority,
            description=description,
            tags=frozenset(tags),
        )

    @model_validator(mode="after")
    def check_start_terminate(self) -> "Meeting":
        if not self.is_valid_start_terminate(self.start, self.terminate):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        return self

    @staticmethod
    def is_valid_start_terminate(start: DateTime, terminate: DateTime) -> bool:
        """Returns True if ``start`` is strictly earlier than ``terminate``."""
        return start < terminate

    def is_same_meeting(self, other: "Meeting") -> bool:
        """Returns True if both meetings have the same name, start and terminate.

        This is the weaker notion of equality, used to detect duplicates and to
        decide whether an edit changes a meeting's identity.
        """
        if other is self:
            return True

        return (
            other is not None
            and other.name == self.name
            and other.start == self.start
            and other.terminate == self.terminate
        )

    def __eq__(self, other: object) -> bool:
        """Returns True if both meetings have the same identity and data fields."""
        if other is self:
            return True

        if not isinstance(other, Meeting):
            return NotImplemented

        return (
            other.name == self.name
            and other.start == self.start
            and other.terminate == self.terminate
            and other.priority == self.priority
            and other.description == self.description
            and other.tags == self.tags
        )

    def __hash__(self) -> int:
        return hash((self.name, self.start, self.terminate, self.priority, self.description, self.tags))

    def __str__(self) -> str:
        text = (
            f"{self.name}"
            f"; Start: {self.start}"
            f"; Terminate: {self.terminate}"
            f"; Priority: {self.priority}"
            f"; Description: {self.description}"
        )
        if self.tags:
            text += "; Tags: " + "".join(str(tag) for tag in sorted(self.tags, key=lambda tag: tag.value))
        return text


def sorted_chronologically(meetings: Iterable[Meeting]) -> List[Meeting]:
    """Return a new list of ``meetings`` ordered by start, then terminate.

    The sort is stable, so meetings with equal times keep their relative order.
    """
    return sorted(meetings, key=lambda meeting: (meeting.start.instant, meeting.terminate.instant))
