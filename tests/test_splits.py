"""Tests for split validators and split kind resolution."""

from decimal import Decimal

import pytest

from splitledger.domain.entities import Split, SplitKind
from splitledger.domain.errors import (
    DuplicateParticipantError,
    EmptySplitError,
    InvalidAmountError,
    PercentageSumError,
    SumMismatchError,
    UnequalShareError,
    UnknownSplitKindError,
    ValidationError,
)
from splitledger.domain.splits import (
    EPSILON,
    parse_split_kind,
    resolve_validator,
    validate_equal,
    validate_percentage,
    validate_unequal,
)


def shares(**amounts):
    return [Split(user_id=user_id, amount=Decimal(str(v))) for user_id, v in amounts.items()]


def percents(**values):
    return [Split(user_id=user_id, percent=Decimal(str(v))) for user_id, v in values.items()]


class TestCommonChecks:
    """Checks every split kind performs first."""

    @pytest.mark.parametrize("validator", [validate_equal, validate_unequal, validate_percentage])
    @pytest.mark.parametrize("total", [Decimal("0"), Decimal("-10")])
    def test_non_positive_total(self, validator, total):
        with pytest.raises(InvalidAmountError):
            validator(shares(u1=0), total)

    @pytest.mark.parametrize("validator", [validate_equal, validate_unequal, validate_percentage])
    def test_no_participants(self, validator):
        with pytest.raises(EmptySplitError):
            validator([], Decimal("100"))

    @pytest.mark.parametrize("validator", [validate_equal, validate_unequal])
    def test_duplicate_participant(self, validator):
        splits = [
            Split(user_id="u1", amount=Decimal("50")),
            Split(user_id="u1", amount=Decimal("50")),
        ]
        with pytest.raises(DuplicateParticipantError, match="u1"):
            validator(splits, Decimal("100"))

    def test_duplicate_participant_percentage(self):
        splits = [
            Split(user_id="u2", percent=Decimal("50")),
            Split(user_id="u2", percent=Decimal("50")),
        ]
        with pytest.raises(DuplicateParticipantError):
            validate_percentage(splits, Decimal("100"))

    def test_errors_are_validation_errors(self):
        """Every split error is a ValidationError and a ValueError."""
        with pytest.raises(ValidationError):
            validate_equal([], Decimal("10"))
        with pytest.raises(ValueError):
            validate_equal([], Decimal("10"))


class TestEqualSplit:
    """Tests for equal split validation."""

    def test_exact_shares(self):
        result = validate_equal(shares(u1=300, u2=300, u3=300), Decimal("900"))
        assert [s.amount for s in result] == [Decimal("300")] * 3

    @pytest.mark.parametrize("total,count", [("100", 3), ("0.01", 7), ("12345.67", 9), ("1", 1)])
    def test_computed_shares_pass(self, total, count):
        """Shares of total / n always validate, including repeating decimals."""
        total = Decimal(total)
        splits = [Split(user_id=f"u{i}", amount=total / count) for i in range(count)]
        assert len(validate_equal(splits, total)) == count

    def test_share_off_by_one(self):
        with pytest.raises(UnequalShareError, match="u3"):
            validate_equal(shares(u1=300, u2=300, u3=299), Decimal("900"))

    def test_rounded_shares_within_epsilon(self):
        third = Decimal("33.3333333")
        splits = shares(u1=third, u2=third, u3=third)
        assert validate_equal(splits, Decimal("100"))

    def test_rounded_shares_outside_epsilon(self):
        """Two-decimal rounding of 100 / 3 is outside the tolerance."""
        with pytest.raises(UnequalShareError):
            validate_equal(shares(u1="33.33", u2="33.33", u3="33.34"), Decimal("100"))

    def test_custom_epsilon(self):
        splits = shares(u1="33.33", u2="33.33", u3="33.34")
        assert validate_equal(splits, Decimal("100"), epsilon=Decimal("0.01"))


class TestUnequalSplit:
    """Tests for unequal split validation."""

    @pytest.mark.parametrize(
        "amounts",
        [
            {"u1": 400, "u2": 100},
            {"u1": 500, "u2": 0},
            {"u1": "0.5", "u2": "250.25", "u3": "249.25"},
        ],
    )
    def test_any_distribution_summing_to_total(self, amounts):
        assert validate_unequal(shares(**amounts), Decimal("500"))

    def test_sum_too_low(self):
        with pytest.raises(SumMismatchError, match="499"):
            validate_unequal(shares(u1=400, u2=99), Decimal("500"))

    def test_sum_too_high(self):
        with pytest.raises(SumMismatchError):
            validate_unequal(shares(u1=400, u2=101), Decimal("500"))

    def test_negative_share(self):
        with pytest.raises(SumMismatchError, match="negative"):
            validate_unequal(shares(u1=600, u2=-100), Decimal("500"))

    def test_sum_within_epsilon(self):
        assert validate_unequal(shares(u1="400.0000001", u2=100), Decimal("500"))

    def test_missing_share(self):
        with pytest.raises(SumMismatchError, match="u2.*has no share"):
            validate_unequal([Split("u1", Decimal("500")), Split("u2", amount=None)], Decimal("500"))

    def test_missing_share_checked_after_common_checks(self):
        with pytest.raises(InvalidAmountError):
            validate_unequal([Split("u1", amount=None)], Decimal("0"))
        with pytest.raises(DuplicateParticipantError):
            validate_unequal([Split("u1", amount=None), Split("u1", amount=None)], Decimal("10"))


class TestPercentageSplit:
    """Tests for percentage split validation."""

    def test_derives_absolute_amounts(self):
        result = validate_percentage(percents(u1=40, u2=20, u3=20, u4=20), Decimal("1200"))
        assert [s.amount for s in result] == [
            Decimal("480"),
            Decimal("240"),
            Decimal("240"),
            Decimal("240"),
        ]
        assert result[0].percent == Decimal("40")

    @pytest.mark.parametrize(
        "values,total",
        [
            ({"u1": "33.3333333", "u2": "33.3333333", "u3": "33.3333334"}, "100"),
            ({"u1": "12.5", "u2": "87.5"}, "19.99"),
            ({"u1": "100"}, "0.07"),
            ({"u1": "0", "u2": "100"}, "250"),
        ],
    )
    def test_derived_amounts_sum_to_total(self, values, total):
        total = Decimal(total)
        result = validate_percentage(percents(**values), total)
        assert abs(sum(s.amount for s in result) - total) <= EPSILON

    def test_percent_sum_mismatch(self):
        with pytest.raises(PercentageSumError, match="99"):
            validate_percentage(percents(u1=50, u2=49), Decimal("100"))

    def test_percent_out_of_range(self):
        with pytest.raises(PercentageSumError):
            validate_percentage(percents(u1=120, u2=-20), Decimal("100"))

    def test_missing_percent(self):
        with pytest.raises(PercentageSumError, match="no percent"):
            validate_percentage(shares(u1=100), Decimal("100"))

    def test_input_not_mutated(self):
        splits = percents(u1=50, u2=50)
        validate_percentage(splits, Decimal("10"))
        assert splits[0].amount == Decimal("0")


class TestValidatorPurity:
    """Validators keep no state between calls."""

    def test_repeated_calls_give_same_result(self):
        splits = percents(u1=25, u2=75)
        first = validate_percentage(splits, Decimal("80"))
        second = validate_percentage(splits, Decimal("80"))
        assert first == second

    def test_repeated_failures_are_identical(self):
        splits = shares(u1=1, u2=2)
        messages = []
        for _ in range(2):
            with pytest.raises(UnequalShareError) as exc_info:
                validate_equal(splits, Decimal("3"))
            messages.append(str(exc_info.value))
        assert messages[0] == messages[1]


class TestResolveValidator:
    """Tests for the split kind to validator mapping."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (SplitKind.EQUAL, validate_equal),
            (SplitKind.UNEQUAL, validate_unequal),
            (SplitKind.PERCENTAGE, validate_percentage),
            ("equal", validate_equal),
            ("UNEQUAL", validate_unequal),
            (" Percentage ", validate_percentage),
        ],
    )
    def test_known_kinds(self, kind, expected):
        assert resolve_validator(kind) is expected

    @pytest.mark.parametrize("kind", ["shares", "", "exact", None, 3])
    def test_unknown_kind(self, kind):
        with pytest.raises(UnknownSplitKindError):
            resolve_validator(kind)

    def test_every_kind_has_a_validator(self):
        for kind in SplitKind:
            assert callable(resolve_validator(kind))

    def test_parse_split_kind(self):
        assert parse_split_kind("percentage") is SplitKind.PERCENTAGE
        assert parse_split_kind(SplitKind.EQUAL) is SplitKind.EQUAL
