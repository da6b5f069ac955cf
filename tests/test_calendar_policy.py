"""Tests for workday eligibility rules."""

from datetime import date

from worktime_sync.engine.calendar_policy import check_eligibility, is_eligible, is_weekend

# 2024-11-01 is a Friday, 2024-11-02 a Saturday, 2024-11-04 a Monday
FRIDAY = date(2024, 11, 1)
SATURDAY = date(2024, 11, 2)
SUNDAY = date(2024, 11, 3)
MONDAY = date(2024, 11, 4)


class TestIsWeekend:
    def test_weekend_days(self):
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)

    def test_weekdays(self):
        assert not is_weekend(FRIDAY)
        assert not is_weekend(MONDAY)


class TestCheckEligibility:
    def test_plain_weekday_eligible(self):
        result = check_eligibility(MONDAY, set(), {}, frozenset())
        assert result.eligible
        assert result.reason is None

    def test_weekend(self):
        result = check_eligibility(SATURDAY, set(), {}, frozenset())
        assert not result.eligible
        assert result.reason == "weekend"

    def test_already_logged(self):
        result = check_eligibility(MONDAY, {MONDAY}, {}, frozenset())
        assert not result.eligible
        assert result.reason == "already logged"

    def test_holiday_reason_includes_name(self):
        result = check_eligibility(FRIDAY, set(), {FRIDAY: "dan spomina na mrtve"}, frozenset())
        assert not result.eligible
        assert result.reason == "holiday: dan spomina na mrtve"

    def test_user_excluded(self):
        result = check_eligibility(MONDAY, set(), {}, frozenset({MONDAY}))
        assert not result.eligible
        assert result.reason == "user-excluded"

    def test_weekend_wins_over_everything(self):
        result = check_eligibility(
            SATURDAY, {SATURDAY}, {SATURDAY: "holiday"}, frozenset({SATURDAY}),
        )
        assert result.reason == "weekend"

    def test_logged_wins_over_holiday_and_exclusion(self):
        result = check_eligibility(FRIDAY, {FRIDAY}, {FRIDAY: "holiday"}, frozenset({FRIDAY}))
        assert result.reason == "already logged"

    def test_holiday_wins_over_exclusion(self):
        result = check_eligibility(FRIDAY, set(), {FRIDAY: "holiday"}, frozenset({FRIDAY}))
        assert result.reason == "holiday: holiday"

    def test_is_eligible_matches(self):
        assert is_eligible(MONDAY, set(), {}, frozenset())
        assert not is_eligible(SUNDAY, set(), {}, frozenset())
