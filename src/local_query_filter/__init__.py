"""
local_query_filter – in-memory filtering, search, sorting and pagination.

Import path convention::

    from local_query_filter import QueryFilter, ComparisonConstraint
    from local_query_filter.kernel.constraints import CompoundConstraint
    from local_query_filter.kernel.errors import ConfigurationError
"""

from local_query_filter.application.pagination import PageWindow
from local_query_filter.application.query import (
    LoggingQueryObserver,
    QueryEvent,
    QueryFilter,
    QueryObserver,
)
from local_query_filter.application.search import SearchMatcher
from local_query_filter.config import QueryFilterSettings, load_settings
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
from local_query_filter.kernel.errors import (
    ConfigurationError,
    ContractViolationError,
    ExtractorError,
    InvalidSettingValueError,
    QueryFilterError,
)
from local_query_filter.observability.logging import configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
    "ArrayMembershipConstraint",
    "ArrayMembershipOperator",
    "BooleanConstraint",
    "ComparisonConstraint",
    "ComparisonOperator",
    "CompoundConstraint",
    "CompoundOperator",
    "ConfigurationError",
    "ContractViolationError",
    "CustomConstraint",
    "DateRangeConstraint",
    "DateTimeRange",
    "EqualityMode",
    "ExtractorError",
    "InvalidSettingValueError",
    "LoggingQueryObserver",
    "PageWindow",
    "QueryConstraint",
    "QueryEvent",
    "QueryFilter",
    "QueryFilterError",
    "QueryFilterSettings",
    "QueryObserver",
    "RangeConstraint",
    "SearchMatcher",
    "__version__",
    "configure_logging",
    "get_logger",
    "load_settings",
]
