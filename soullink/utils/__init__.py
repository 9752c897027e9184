# ABOUTME: Utils package for SoulLink utility functions.
# ABOUTME: Contains reusable helpers like the type chart module.

from soullink.utils.type_chart import (
    TYPE_CHART,
    TYPES,
    TypeChartEntry,
    get_entry,
    is_known_type,
    normalize_type,
    normalize_types,
)

__all__ = [
    "TYPES",
    "TYPE_CHART",
    "TypeChartEntry",
    "get_entry",
    "is_known_type",
    "normalize_type",
    "normalize_types",
]
