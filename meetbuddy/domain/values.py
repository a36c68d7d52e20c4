"""Value objects carried by a meeting.

``Name`` is validated here because it is part of a meeting's identity.
``Priority``, ``Description`` and ``Tag`` arrive already validated from the
command layer and are only wrapped so they compare, hash and render.
"""
import re
from typing import ClassVar
from pydantic import BaseModel, field_validator

from meetbuddy.domain.exceptions import require_non_null


class ValueObject(BaseModel):
    """Immutable wrapper around a single text value."""
    value: str

    class Config:
        frozen = True

    def __init__(self, value: str, **data):
        require_non_null(value=value)
        super().__init__(value=value, **data)

    def __str__(self) -> str:
        return self.value


class Name(ValueObject):
    """Name of a meeting: letters, digits and spaces, starting with a letter or digit."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    @field_validator("value")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not cls.is_valid_name(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    @classmethod
    def is_valid_name(cls, test: str) -> bool:
        """Returns True if ``test`` is a valid meeting name."""
        require_non_null(test=test)
        return cls.VALIDATION_REGEX.fullmatch(test) is not None


class Priority(ValueObject):
    """Priority indicator of a meeting."""


class Description(ValueObject):
    """Free-text description of a meeting."""


class Tag(ValueObject):
    """Short label attached to a meeting."""

    def __str__(self) -> str:
        return f"[{self.value}]"
