"""Application search – text search over extracted fields."""
from local_query_filter.application.search.matcher import SearchMatcher, normalize_term

__all__ = ["SearchMatcher", "normalize_term"]
