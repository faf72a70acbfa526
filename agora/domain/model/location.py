"""Geographic location of a talk session."""

from pydantic import field_validator

from agora.domain.error import InvalidLocationError
from agora.domain.value.common import ValueObject


class Location(ValueObject):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        if not -90.0 <= v <= 90.0:
            raise InvalidLocationError(f"Latitude must be within [-90, 90], got {v}")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        if not -180.0 <= v <= 180.0:
            raise InvalidLocationError(
                f"Longitude must be within [-180, 180], got {v}"
            )
        return v
