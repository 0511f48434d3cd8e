"""
Prometheus metrics exposed at /metrics.
"""

from prometheus_client import Counter, Gauge

PRODUCTS_TOTAL = Gauge("catalog_products_total", "Products currently held in the catalog store")

PRODUCT_OPERATIONS = Counter(
    "catalog_product_operations_total",
    "Catalog operations by kind and outcome",
    ["operation", "outcome"],
)
