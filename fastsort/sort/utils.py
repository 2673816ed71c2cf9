# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from fastsort.sort.parser import DEFAULT_PROPERTY_DELIMITER
from fastsort.sort.types import Order, Sort


def to_query_value(order: Order, delimiter: str = DEFAULT_PROPERTY_DELIMITER) -> str:
    return f"{order.property}{delimiter}{order.direction.name}"


def to_query_values(sort: Sort, delimiter: str = DEFAULT_PROPERTY_DELIMITER) -> list[str]:
    return [to_query_value(order, delimiter) for order in sort]


def fold_into_expressions(
    sort: Sort,
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
) -> list[str]:
    """
    Fold consecutive orders sharing the same direction into one expression.

    `Sort.by("a", "b").and_(Sort.by("c", direction=Direction.DESC))` gives
    `["a,b,ASC", "c,DESC"]`.
    """
    expressions = []
    properties: list[str] = []
    current = None

    for order in sort:
        if current is not None and order.direction is not current:
            expressions.append(delimiter.join([*properties, current.name]))
            properties = []

        current = order.direction
        properties.append(order.property)

    if current is not None:
        expressions.append(delimiter.join([*properties, current.name]))

    return expressions


def to_query_params(
    sort: Sort,
    parameter: str = "sort",
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
) -> list[tuple[str, str]]:
    return [(parameter, value) for value in to_query_values(sort, delimiter)]


def merge_sorts(*sorts: Sort | None) -> Sort:
    merged = Sort.unsorted()

    for sort in sorts:
        if sort is not None:
            merged = merged.and_(sort)

    return merged


__all__ = [
    "to_query_value",
    "to_query_values",
    "fold_into_expressions",
    "to_query_params",
    "merge_sorts",
]
