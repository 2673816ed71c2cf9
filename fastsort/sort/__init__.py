# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

# Types
from fastsort.sort.types import (
    InvalidSortError,
    Direction,
    DIRECTION_KEYWORDS,
    Order,
    Sort,
)

# Parser
from fastsort.sort.parser import (
    DEFAULT_PROPERTY_DELIMITER,
    PROPERTY_PATH_SEPARATOR,
    is_valid_property,
    parse_sort_value,
    parse_sort_values,
)

# Utils
from fastsort.sort.utils import (
    to_query_value,
    to_query_values,
    fold_into_expressions,
    to_query_params,
    merge_sorts,
)


__all__ = [
    # Types
    "InvalidSortError",
    "Direction",
    "DIRECTION_KEYWORDS",
    "Order",
    "Sort",
    # Parser
    "DEFAULT_PROPERTY_DELIMITER",
    "PROPERTY_PATH_SEPARATOR",
    "is_valid_property",
    "parse_sort_value",
    "parse_sort_values",
    # Utils
    "to_query_value",
    "to_query_values",
    "fold_into_expressions",
    "to_query_params",
    "merge_sorts",
]
