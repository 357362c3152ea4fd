"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    QueryFilterError
    ├── ConfigurationError
    │   └── InvalidSettingValueError
    ├── ExtractorError
    └── ContractViolationError
"""

from local_query_filter.kernel.errors.base import QueryFilterError
from local_query_filter.kernel.errors.query import (
    ConfigurationError,
    ContractViolationError,
    ExtractorError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ExtractorError",
    "InvalidSettingValueError",
    "QueryFilterError",
]
