"""Testing – sample records, counting extractors and Hypothesis strategies."""
from local_query_filter.testing.records import CountingExtractor, Product
from local_query_filter.testing.strategies import bounds_strategy, product_strategy, products_strategy

__all__ = [
    "CountingExtractor",
    "Product",
    "bounds_strategy",
    "product_strategy",
    "products_strategy",
]
