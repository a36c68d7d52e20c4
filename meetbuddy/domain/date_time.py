"""Date time value used for the start and terminate of a meeting."""
import re
from datetime import datetime
from typing import ClassVar
from pydantic import BaseModel, field_validator

from meetbuddy.domain.exceptions import require_non_null

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


class DateTime(BaseModel):
    """A calendar timestamp in ``yyyy-MM-dd HH:mm`` form.

    Guarantees: immutable; the text denotes a real date and a real time of day.
    Instances are ordered chronologically.

    Example:
        >>> DateTime("2021-11-02 23:00") < DateTime("2021-11-03 08:30")
        True
    """
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Date time should be a real date and time in the format yyyy-MM-dd HH:mm, "
        "e.g. 2021-11-02 23:00"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")

    class Config:
        frozen = True

    def __init__(self, value: str, **data):
        require_non_null(value=value)
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def validate_date_time(cls, v: str) -> str:
        if not cls.is_valid_date_time(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    @classmethod
    def parse(cls, text: str) -> "DateTime":
        """Build a ``DateTime`` from user input.

        Raises:
            TypeError: If ``text`` is None
            ValueError: If ``text`` is not a valid date time
        """
        return cls(text)

    @classmethod
    def is_valid_date_time(cls, test: str) -> bool:
        """Returns True if ``test`` matches the format and denotes a real date and time."""
        require_non_null(test=test)
        if cls.VALIDATION_REGEX.fullmatch(test) is None:
            return False
        try:
            datetime.strptime(test, DATE_TIME_FORMAT)
        except ValueError:
            return False
        return True

    @property
    def instant(self) -> datetime:
        return datetime.strptime(self.value, DATE_TIME_FORMAT)

    def __lt__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.instant < other.instant

    def __le__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.instant <= other.instant

    def __gt__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.instant > other.instant

    def __ge__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.instant >= other.instant

    def __str__(self) -> str:
        return self.value
