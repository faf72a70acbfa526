"""User aggregate and demographics.

Users are owned by the identity subsystem; this service only reads them
to evaluate talk session restrictions and ownership rules.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import field_validator

from agora.domain.error import InvalidDateOfBirthError
from agora.domain.model.common import DomainModel
from agora.domain.value import UserId
from agora.domain.value.common import RootValueObject, ValueObject


def is_valid_date_format(value: int) -> bool:
    """Check that an int is a real calendar date in ``YYYYMMDD`` form."""
    if value < 19000101 or value > 99991231:
        return False

    year, month, day = value // 10000, (value % 10000) // 100, value % 100

    if month < 1 or month > 12:
        return False

    if month in (4, 6, 9, 11):
        max_days = 30
    elif month == 2:
        leap = year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
        max_days = 29 if leap else 28
    else:
        max_days = 31

    return 1 <= day <= max_days


class DateOfBirth(RootValueObject[int]):
    """Birth date stored as a ``YYYYMMDD`` integer, e.g. ``19900616``."""

    @field_validator("root")
    @classmethod
    def validate_date_format(cls, v: int) -> int:
        if not is_valid_date_format(v):
            raise InvalidDateOfBirthError(v)
        return v

    @classmethod
    def parse(cls, value: Optional[int]) -> Optional["DateOfBirth"]:
        """Build a DateOfBirth, returning None for missing or invalid input."""
        if not value or not is_valid_date_format(value):
            return None
        return cls(value)

    @property
    def year(self) -> int:
        return self.root // 10000

    @property
    def month(self) -> int:
        return (self.root % 10000) // 100

    @property
    def day(self) -> int:
        return self.root % 100

    def age(self, now: datetime) -> int:
        """Full years lived at ``now``.

        The birthday itself counts as the day the age rolls over.
        """
        age = now.year - self.year
        if (now.month, now.day) < (self.month, self.day):
            age -= 1
        return age


class Demographics(ValueObject):
    """Self-reported participant attributes."""

    date_of_birth: Optional[DateOfBirth] = None
    gender: Optional[str] = None
    city: Optional[str] = None
    prefecture: Optional[str] = None
    occupation: Optional[str] = None
    household_size: Optional[int] = None

    def age(self, now: datetime) -> Optional[int]:
        return self.date_of_birth.age(now) if self.date_of_birth else None


class User(DomainModel):
    """User aggregate root.

    A user is considered registered once a display id has been chosen.
    """

    id: UserId
    display_id: Optional[str] = None
    display_name: Optional[str] = None
    icon_url: Optional[str] = None
    demographics: Optional[Demographics] = None
    organization_id: Optional[UUID] = None

    @property
    def is_registered(self) -> bool:
        return bool(self.display_id)

    @property
    def belongs_to_organization(self) -> bool:
        return self.organization_id is not None
