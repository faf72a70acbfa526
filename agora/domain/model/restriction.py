"""Participation restrictions a talk session can declare."""

from typing import Callable

from agora.domain.model.user import User
from agora.domain.value import RestrictionAttributeKey
from agora.domain.value.common import ValueObject


class RestrictionAttribute(ValueObject):
    """A participation requirement and the check that decides it."""

    key: RestrictionAttributeKey
    description: str
    order: int
    depends_on: tuple[RestrictionAttributeKey, ...] = ()
    is_satisfied: Callable[[User], bool]


def _has_demographic(field: str) -> Callable[[User], bool]:
    def check(user: User) -> bool:
        if user.demographics is None:
            return False
        return getattr(user.demographics, field) is not None

    return check


RESTRICTION_ATTRIBUTES: dict[RestrictionAttributeKey, RestrictionAttribute] = {
    attr.key: attr
    for attr in (
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_GENDER,
            description="性別",
            order=0,
            is_satisfied=_has_demographic("gender"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_BIRTH,
            description="生年月日",
            order=1,
            is_satisfied=_has_demographic("date_of_birth"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_CITY,
            description="市区町村",
            order=2,
            depends_on=(RestrictionAttributeKey.DEMOGRAPHICS_PREFECTURE,),
            is_satisfied=_has_demographic("city"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_PREFECTURE,
            description="都道府県",
            order=3,
            is_satisfied=_has_demographic("prefecture"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_HOUSEHOLD_SIZE,
            description="世帯人数",
            order=4,
            is_satisfied=_has_demographic("household_size"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.DEMOGRAPHICS_OCCUPATION,
            description="職業",
            order=5,
            is_satisfied=_has_demographic("occupation"),
        ),
        RestrictionAttribute(
            key=RestrictionAttributeKey.AUTH_REGISTER,
            description="ユーザー登録",
            order=6,
            is_satisfied=lambda user: user.is_registered,
        ),
    )
}


def restriction_attribute(key: RestrictionAttributeKey) -> RestrictionAttribute:
    return RESTRICTION_ATTRIBUTES[key]


def unsatisfied_restrictions(
    user: User, keys: list[RestrictionAttributeKey]
) -> list[RestrictionAttribute]:
    """Return the attributes ``user`` does not meet, in display order.

    Dependencies of a declared key are checked as well, so a session that
    restricts by city also requires a prefecture.
    """
    required: dict[RestrictionAttributeKey, RestrictionAttribute] = {}
    for key in keys:
        attr = RESTRICTION_ATTRIBUTES[key]
        required[key] = attr
        for dependency in attr.depends_on:
            required[dependency] = RESTRICTION_ATTRIBUTES[dependency]

    missing = [attr for attr in required.values() if not attr.is_satisfied(user)]
    return sorted(missing, key=lambda attr: attr.order)
