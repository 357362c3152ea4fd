"""Unit tests for query constraints."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from local_query_filter.kernel.constraints import (
    ArrayMembershipConstraint,
    ArrayMembershipOperator,
    BooleanConstraint,
    ComparisonConstraint,
    ComparisonOperator,
    CompoundConstraint,
    CompoundOperator,
    CustomConstraint,
    DateRangeConstraint,
    DateTimeRange,
    EqualityMode,
    QueryConstraint,
    RangeConstraint,
)
from local_query_filter.kernel.errors import ConfigurationError, ContractViolationError
from local_query_filter.testing import Product


def _product(**kw) -> Product:
    kw.setdefault("id", "p")
    kw.setdefault("name", "Thing")
    return Product(**kw)


# ---------------------------------------------------------------------------
# BooleanConstraint
# ---------------------------------------------------------------------------


class TestBooleanConstraint:
    def test_is_true(self) -> None:
        c = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
        assert c.matches(_product(is_active=True))
        assert not c.matches(_product(is_active=False))

    def test_is_false(self) -> None:
        c = BooleanConstraint.is_false(field_extractor=lambda p: p.is_active)
        assert c.matches(_product(is_active=False))
        assert not c.matches(_product(is_active=True))

    def test_expected_value_exposed(self) -> None:
        assert BooleanConstraint.is_false(lambda p: p.is_active).expected_value is False


# ---------------------------------------------------------------------------
# ComparisonConstraint
# ---------------------------------------------------------------------------


class _CaseInsensitive:
    """Orders case-insensitively but compares equal only on exact text."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _CaseInsensitive) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __lt__(self, other: "_CaseInsensitive") -> bool:
        return self.text.lower() < other.text.lower()


class TestComparisonConstraint:
    @pytest.mark.parametrize(
        ("factory", "price", "expected"),
        [
            (ComparisonConstraint.equal, 50.0, True),
            (ComparisonConstraint.equal, 51.0, False),
            (ComparisonConstraint.not_equal, 51.0, True),
            (ComparisonConstraint.not_equal, 50.0, False),
            (ComparisonConstraint.greater_than, 50.0, False),
            (ComparisonConstraint.greater_than, 50.5, True),
            (ComparisonConstraint.greater_than_or_equal, 50.0, True),
            (ComparisonConstraint.greater_than_or_equal, 49.9, False),
            (ComparisonConstraint.less_than, 50.0, False),
            (ComparisonConstraint.less_than, 10.0, True),
            (ComparisonConstraint.less_than_or_equal, 50.0, True),
            (ComparisonConstraint.less_than_or_equal, 50.1, False),
        ],
    )
    def test_operators(self, factory, price: float, expected: bool) -> None:
        c = factory(value=50.0, field_extractor=lambda p: p.price)
        assert c.matches(_product(price=price)) is expected

    def test_operator_exposed(self) -> None:
        c = ComparisonConstraint.greater_than_or_equal(value=1, field_extractor=lambda p: p.stock)
        assert c.operator is ComparisonOperator.GREATER_THAN_OR_EQUAL
        assert c.value == 1

    def test_strings_use_native_order(self) -> None:
        c = ComparisonConstraint.less_than(value="b", field_extractor=lambda p: p.name)
        assert c.matches(_product(name="apple"))
        assert not c.matches(_product(name="banana"))

    def test_equal_uses_value_equality_by_default(self) -> None:
        c = ComparisonConstraint.equal(value=_CaseInsensitive("Shoe"), field_extractor=lambda m: m)
        assert c.matches(_CaseInsensitive("Shoe"))
        assert not c.matches(_CaseInsensitive("shoe"))

    def test_equal_with_ordering_mode(self) -> None:
        c = ComparisonConstraint.equal(
            value=_CaseInsensitive("Shoe"),
            field_extractor=lambda m: m,
            equality=EqualityMode.ORDERING,
        )
        assert c.matches(_CaseInsensitive("shoe"))

    def test_not_equal_with_ordering_mode(self) -> None:
        c = ComparisonConstraint.not_equal(
            value=_CaseInsensitive("Shoe"),
            field_extractor=lambda m: m,
            equality=EqualityMode.ORDERING,
        )
        assert not c.matches(_CaseInsensitive("SHOE"))
        assert c.matches(_CaseInsensitive("Hat"))

    def test_incomparable_types_raise_contract_violation(self) -> None:
        c = ComparisonConstraint.greater_than(value=10, field_extractor=lambda p: p.name)
        with pytest.raises(ContractViolationError) as info:
            c.matches(_product(name="ten"))
        assert isinstance(info.value.__cause__, TypeError)
        assert info.value.detail == {"left_type": "str", "right_type": "int"}

    def test_extractor_error_propagates_unchanged(self) -> None:
        def boom(p: Product) -> float:
            raise KeyError("price")

        c = ComparisonConstraint.less_than(value=1, field_extractor=boom)
        with pytest.raises(KeyError):
            c.matches(_product())

    def test_unknown_operator_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ComparisonConstraint("between", 1, lambda p: p.price)  # type: ignore[arg-type]

    def test_operator_accepts_string_value(self) -> None:
        c = ComparisonConstraint("lte", 5, lambda p: p.stock)  # type: ignore[arg-type]
        assert c.operator is ComparisonOperator.LESS_THAN_OR_EQUAL


# ---------------------------------------------------------------------------
# RangeConstraint
# ---------------------------------------------------------------------------


class TestRangeConstraint:
    def test_inclusive_bounds(self) -> None:
        c = RangeConstraint.for_range(min_value=10, max_value=20, field_extractor=lambda p: p.stock)
        assert c.matches(_product(stock=10))
        assert c.matches(_product(stock=15))
        assert c.matches(_product(stock=20))

    def test_outside_bounds(self) -> None:
        c = RangeConstraint.for_range(min_value=10, max_value=20, field_extractor=lambda p: p.stock)
        assert not c.matches(_product(stock=9))
        assert not c.matches(_product(stock=21))

    def test_degenerate_range(self) -> None:
        c = RangeConstraint.for_range(min_value=5, max_value=5, field_extractor=lambda p: p.stock)
        assert c.matches(_product(stock=5))
        assert not c.matches(_product(stock=4))

    def test_min_greater_than_max_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as info:
            RangeConstraint.for_range(min_value=20, max_value=10, field_extractor=lambda p: p.stock)
        assert info.value.code == "configuration_error"

    def test_incomparable_bounds_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            RangeConstraint.for_range(min_value=1, max_value="z", field_extractor=lambda p: p.stock)

    def test_bounds_exposed(self) -> None:
        c = RangeConstraint.for_range(min_value=1.5, max_value=2.5, field_extractor=lambda p: p.price)
        assert (c.min_value, c.max_value) == (1.5, 2.5)


# ---------------------------------------------------------------------------
# DateRangeConstraint / DateTimeRange
# ---------------------------------------------------------------------------


class TestDateTimeRange:
    def test_start_after_end_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DateTimeRange(datetime(2024, 2, 1), datetime(2024, 1, 1))

    def test_mixed_naive_and_aware_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DateTimeRange(datetime(2024, 1, 1), datetime(2024, 2, 1, tzinfo=timezone.utc))

    def test_for_day_spans_whole_day(self) -> None:
        r = DateTimeRange.for_day(date(2024, 3, 5))
        assert r.start == datetime(2024, 3, 5, 0, 0)
        assert r.end.date() == date(2024, 3, 5)
        assert r.contains(datetime(2024, 3, 5, 23, 59, 59))
        assert not r.contains(datetime(2024, 3, 6, 0, 0))

    def test_duration(self) -> None:
        r = DateTimeRange(datetime(2024, 1, 1), datetime(2024, 1, 3))
        assert r.duration.days == 2


class TestDateRangeConstraint:
    def test_with_time(self) -> None:
        c = DateRangeConstraint.between(
            start=datetime(2023, 10, 26, 10, 0),
            end=datetime(2023, 10, 26, 18, 0),
            field_extractor=lambda p: p.created_at,
        )
        assert c.matches(_product(created_at=datetime(2023, 10, 26, 10, 0)))
        assert c.matches(_product(created_at=datetime(2023, 10, 26, 18, 0)))
        assert not c.matches(_product(created_at=datetime(2023, 10, 26, 9, 59)))
        assert not c.matches(_product(created_at=datetime(2023, 10, 26, 18, 1)))

    def test_ignore_time_truncates_value_and_bounds(self) -> None:
        c = DateRangeConstraint.for_range(
            date_range=DateTimeRange(datetime(2023, 10, 26, 10, 0), datetime(2023, 10, 27, 8, 0)),
            field_extractor=lambda p: p.created_at,
            ignore_time=True,
        )
        assert c.ignore_time
        assert c.matches(_product(created_at=datetime(2023, 10, 26, 1, 0)))
        assert c.matches(_product(created_at=datetime(2023, 10, 27, 23, 0)))
        assert not c.matches(_product(created_at=datetime(2023, 10, 25, 23, 59)))
        assert not c.matches(_product(created_at=datetime(2023, 10, 28, 0, 0)))

    def test_ignore_time_accepts_plain_dates(self) -> None:
        c = DateRangeConstraint.between(
            start=datetime(2024, 1, 1, 12),
            end=datetime(2024, 1, 31, 12),
            field_extractor=lambda d: d,
            ignore_time=True,
        )
        assert c.matches(date(2024, 1, 1))
        assert not c.matches(date(2024, 2, 1))

    def test_requires_date_time_range(self) -> None:
        with pytest.raises(ConfigurationError):
            DateRangeConstraint((datetime(2024, 1, 1), datetime(2024, 1, 2)), lambda p: p.created_at)  # type: ignore[arg-type]

    def test_naive_value_against_aware_bounds_is_contract_violation(self) -> None:
        c = DateRangeConstraint.between(
            start=datetime(2024, 1, 1, tzinfo=timezone.utc),
            end=datetime(2024, 2, 1, tzinfo=timezone.utc),
            field_extractor=lambda p: p.created_at,
        )
        with pytest.raises(ContractViolationError):
            c.matches(_product(created_at=datetime(2024, 1, 5)))


# ---------------------------------------------------------------------------
# ArrayMembershipConstraint
# ---------------------------------------------------------------------------


class TestArrayMembershipConstraint:
    def test_contains_single_value(self) -> None:
        c = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda p: p.tags)
        assert c.operator is ArrayMembershipOperator.CONTAINS
        assert c.matches(_product(tags=("sale",)))
        assert c.matches(_product(tags=("new", "sale")))
        assert not c.matches(_product(tags=("new",)))
        assert not c.matches(_product(tags=()))

    def test_contains_is_membership_not_subset(self) -> None:
        c = ArrayMembershipConstraint.array_contains(value=("sale", "new"), field_extractor=lambda p: p.tags)
        assert not c.matches(_product(tags=("sale", "new")))

    def test_contains_requires_exactly_one_value(self) -> None:
        with pytest.raises(ConfigurationError):
            ArrayMembershipConstraint(ArrayMembershipOperator.CONTAINS, ["a", "b"], lambda p: p.tags)

    def test_contains_any(self) -> None:
        c = ArrayMembershipConstraint.array_contains_any(
            values=["sale", "clearance"], field_extractor=lambda p: p.tags
        )
        assert c.matches(_product(tags=("new", "clearance")))
        assert not c.matches(_product(tags=("new", "featured")))

    def test_contains_any_with_empty_values_never_matches(self) -> None:
        c = ArrayMembershipConstraint.array_contains_any(values=[], field_extractor=lambda p: p.tags)
        assert not c.matches(_product(tags=("sale",)))

    def test_where_in(self) -> None:
        c = ArrayMembershipConstraint.where_in(values=["shoes", "hats"], field_extractor=lambda p: p.category)
        assert c.matches(_product(category="hats"))
        assert not c.matches(_product(category="bags"))

    def test_where_not_in(self) -> None:
        c = ArrayMembershipConstraint.where_not_in(values=["shoes"], field_extractor=lambda p: p.category)
        assert c.matches(_product(category="hats"))
        assert not c.matches(_product(category="shoes"))

    def test_values_deduplicated(self) -> None:
        c = ArrayMembershipConstraint.where_in(values=["a", "a", "b"], field_extractor=lambda p: p.category)
        assert c.values == frozenset({"a", "b"})

    def test_unhashable_values_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ArrayMembershipConstraint.where_in(values=[["a"]], field_extractor=lambda p: p.category)

    def test_unknown_operator_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ArrayMembershipConstraint("contains_all", ["a"], lambda p: p.tags)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["wholesale", b"wholesale", bytearray(b"wholesale")])
    def test_contains_rejects_text_field(self, text) -> None:
        c = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda s: s)
        with pytest.raises(ContractViolationError) as info:
            c.matches(text)
        assert info.value.detail == {"operator": "contains", "field_type": type(text).__name__}

    def test_contains_any_rejects_text_field(self) -> None:
        c = ArrayMembershipConstraint.array_contains_any(values=["s", "a"], field_extractor=lambda s: s)
        with pytest.raises(ContractViolationError):
            c.matches("sale")

    def test_contains_accepts_any_collection(self) -> None:
        c = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda s: s)
        assert c.matches(["sale"])
        assert c.matches({"sale", "new"})
        assert not c.matches(("wholesale",))

    @pytest.mark.parametrize("factory", [ArrayMembershipConstraint.where_in, ArrayMembershipConstraint.where_not_in])
    def test_unhashable_field_value_is_contract_violation(self, factory) -> None:
        c = factory(values=[1, 2], field_extractor=lambda v: v)
        with pytest.raises(ContractViolationError) as info:
            c.matches([1])
        assert isinstance(info.value.__cause__, TypeError)
        assert info.value.detail["field_type"] == "list"


# ---------------------------------------------------------------------------
# CustomConstraint
# ---------------------------------------------------------------------------


class TestCustomConstraint:
    def test_predicate_evaluated(self) -> None:
        c = CustomConstraint(lambda p: p.stock % 2 == 0)
        assert c.matches(_product(stock=4))
        assert not c.matches(_product(stock=3))

    def test_default_name(self) -> None:
        assert CustomConstraint(lambda p: True).name == "<lambda>"

    def test_name_from_function(self) -> None:
        def in_stock(p: Product) -> bool:
            return p.stock > 0

        assert CustomConstraint(in_stock).name == "in_stock"

    def test_custom_name(self) -> None:
        assert CustomConstraint(lambda p: True, name="always").name == "always"

    def test_predicate_error_propagates(self) -> None:
        c = CustomConstraint(lambda p: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            c.matches(_product())


# ---------------------------------------------------------------------------
# CompoundConstraint
# ---------------------------------------------------------------------------


def _record(calls: list[str], label: str, result: bool) -> QueryConstraint[Product]:
    def predicate(_: Product) -> bool:
        calls.append(label)
        return result

    return CustomConstraint(predicate, name=label)


class TestCompoundConstraint:
    def test_and(self) -> None:
        cheap = ComparisonConstraint.less_than(value=100, field_extractor=lambda p: p.price)
        active = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
        c = CompoundConstraint.and_([cheap, active])
        assert c.operator is CompoundOperator.AND
        assert c.matches(_product(price=10, is_active=True))
        assert not c.matches(_product(price=10, is_active=False))
        assert not c.matches(_product(price=200, is_active=True))

    def test_or(self) -> None:
        cheap = ComparisonConstraint.less_than(value=100, field_extractor=lambda p: p.price)
        active = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
        c = CompoundConstraint.or_([cheap, active])
        assert c.matches(_product(price=200, is_active=True))
        assert c.matches(_product(price=10, is_active=False))
        assert not c.matches(_product(price=200, is_active=False))

    def test_not(self) -> None:
        active = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
        c = CompoundConstraint.not_(active)
        assert c.matches(_product(is_active=False))
        assert not c.matches(_product(is_active=True))

    def test_and_short_circuits_left_to_right(self) -> None:
        calls: list[str] = []
        c = CompoundConstraint.and_([_record(calls, "a", True), _record(calls, "b", False), _record(calls, "c", True)])
        assert not c.matches(_product())
        assert calls == ["a", "b"]

    def test_or_short_circuits_left_to_right(self) -> None:
        calls: list[str] = []
        c = CompoundConstraint.or_([_record(calls, "a", False), _record(calls, "b", True), _record(calls, "c", True)])
        assert c.matches(_product())
        assert calls == ["a", "b"]

    def test_empty_and_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CompoundConstraint.and_([])

    def test_empty_or_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CompoundConstraint.or_([])

    def test_not_without_children_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CompoundConstraint(CompoundOperator.NOT, [])

    def test_not_with_two_children_rejected(self) -> None:
        a = CustomConstraint(lambda p: True)
        with pytest.raises(ConfigurationError) as info:
            CompoundConstraint(CompoundOperator.NOT, [a, a])
        assert info.value.detail["children"] == 2

    def test_non_constraint_child_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CompoundConstraint.and_([lambda p: True])  # type: ignore[list-item]

    def test_children_snapshot_is_immutable(self) -> None:
        children = [CustomConstraint(lambda p: True)]
        c = CompoundConstraint.and_(children)
        children.append(CustomConstraint(lambda p: False))
        assert len(c.constraints) == 1
        assert c.matches(_product())

    def test_double_negation(self) -> None:
        active = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
        twice = CompoundConstraint.not_(CompoundConstraint.not_(active))
        for flag in (True, False):
            assert twice.matches(_product(is_active=flag)) == active.matches(_product(is_active=flag))

    def test_operator_overloads(self) -> None:
        cheap = ComparisonConstraint.less_than(value=100, field_extractor=lambda p: p.price)
        sale = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda p: p.tags)
        assert isinstance(cheap & sale, CompoundConstraint)
        assert (cheap & sale).operator is CompoundOperator.AND
        assert (cheap | sale).operator is CompoundOperator.OR
        assert (~cheap).operator is CompoundOperator.NOT
        c = cheap & ~sale
        assert c.matches(_product(price=10, tags=("new",)))
        assert not c.matches(_product(price=10, tags=("sale",)))

    def test_invert_of_compound(self) -> None:
        cheap = ComparisonConstraint.less_than(value=100, field_extractor=lambda p: p.price)
        c = ~~cheap
        assert c.matches(_product(price=10))
        assert not c.matches(_product(price=500))
