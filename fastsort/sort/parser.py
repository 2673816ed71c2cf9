# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

import logging

from typing import Iterable

from fastsort.sort.types import (
    PROPERTY_PATH_SEPARATOR,
    Direction,
    Order,
    Sort,
    is_valid_property,
)


DEFAULT_PROPERTY_DELIMITER = ","


logger = logging.getLogger("fastsort.sort")


def parse_sort_value(
    value: str | None,
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
) -> list[Order]:
    if not value or not value.strip():
        return []

    tokens = value.split(delimiter)
    direction = Direction.from_optional_string(tokens[-1])

    if direction is None:
        direction = Direction.ASC
    else:
        tokens = tokens[:-1]

    orders = []

    for token in tokens:
        prop = token.strip()

        if not is_valid_property(prop):
            logger.debug(f"Ignore invalid sort property '{prop}' in '{value}'")
            continue

        orders.append(Order(prop, direction))

    return orders


def parse_sort_values(
    values: Iterable[str | None] | str | None,
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
) -> Sort:
    if not values:
        return Sort.unsorted()

    if isinstance(values, str):
        values = [values]

    orders = []

    for value in values:
        orders.extend(parse_sort_value(value, delimiter))

    return Sort(tuple(orders))


__all__ = [
    "DEFAULT_PROPERTY_DELIMITER",
    "PROPERTY_PATH_SEPARATOR",
    "is_valid_property",
    "parse_sort_value",
    "parse_sort_values",
]
