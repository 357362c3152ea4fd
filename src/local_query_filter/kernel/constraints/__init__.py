"""Query constraints — public re-export surface.

Variants::

    QueryConstraint
    ├── BooleanConstraint          (boolean.py)
    ├── ComparisonConstraint       (comparison.py)
    ├── RangeConstraint            (range.py)
    ├── DateRangeConstraint        (date_range.py)
    ├── ArrayMembershipConstraint  (array_membership.py)
    ├── CompoundConstraint         (base.py)
    └── CustomConstraint           (custom.py)
"""

from local_query_filter.kernel.constraints.array_membership import (
    ArrayMembershipConstraint,
    ArrayMembershipOperator,
)
from local_query_filter.kernel.constraints.base import (
    CompoundConstraint,
    CompoundOperator,
    QueryConstraint,
)
from local_query_filter.kernel.constraints.boolean import BooleanConstraint
from local_query_filter.kernel.constraints.comparison import ComparisonConstraint, ComparisonOperator
from local_query_filter.kernel.constraints.custom import CustomConstraint
from local_query_filter.kernel.constraints.date_range import DateRangeConstraint, DateTimeRange
from local_query_filter.kernel.constraints.ordering import EqualityMode
from local_query_filter.kernel.constraints.range import RangeConstraint

__all__ = [
    "ArrayMembershipConstraint",
    "ArrayMembershipOperator",
    "BooleanConstraint",
    "ComparisonConstraint",
    "ComparisonOperator",
    "CompoundConstraint",
    "CompoundOperator",
    "CustomConstraint",
    "DateRangeConstraint",
    "DateTimeRange",
    "EqualityMode",
    "QueryConstraint",
    "RangeConstraint",
]
