"""Unit tests for restriction evaluation."""

from agora.domain.model import DateOfBirth, Demographics
from agora.domain.model.restriction import unsatisfied_restrictions
from agora.domain.value import RestrictionAttributeKey as Key
from tests.conftest import make_user


class TestUnsatisfiedRestrictions:
    def test_no_restrictions(self):
        assert unsatisfied_restrictions(make_user(), []) == []

    def test_missing_demographics(self):
        missing = unsatisfied_restrictions(
            make_user(), [Key.DEMOGRAPHICS_GENDER, Key.DEMOGRAPHICS_BIRTH]
        )

        assert [attr.key for attr in missing] == [
            Key.DEMOGRAPHICS_GENDER,
            Key.DEMOGRAPHICS_BIRTH,
        ]

    def test_satisfied_demographics(self):
        user = make_user(
            demographics=Demographics(
                gender="female", date_of_birth=DateOfBirth(19900616)
            )
        )

        assert (
            unsatisfied_restrictions(
                user, [Key.DEMOGRAPHICS_GENDER, Key.DEMOGRAPHICS_BIRTH]
            )
            == []
        )

    def test_city_requires_prefecture(self):
        user = make_user(demographics=Demographics(city="Shibuya"))

        missing = unsatisfied_restrictions(user, [Key.DEMOGRAPHICS_CITY])

        assert [attr.key for attr in missing] == [Key.DEMOGRAPHICS_PREFECTURE]

    def test_results_follow_display_order(self):
        missing = unsatisfied_restrictions(
            make_user(registered=False),
            [Key.AUTH_REGISTER, Key.DEMOGRAPHICS_OCCUPATION, Key.DEMOGRAPHICS_GENDER],
        )

        assert [attr.key for attr in missing] == [
            Key.DEMOGRAPHICS_GENDER,
            Key.DEMOGRAPHICS_OCCUPATION,
            Key.AUTH_REGISTER,
        ]

    def test_registration(self):
        assert unsatisfied_restrictions(make_user(), [Key.AUTH_REGISTER]) == []
        assert len(
            unsatisfied_restrictions(make_user(registered=False), [Key.AUTH_REGISTER])
        ) == 1
