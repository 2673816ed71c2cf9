# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class InvalidSortError(ValueError): ...


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        direction = cls.from_optional_string(value)

        if direction is None:
            raise InvalidSortError(
                f"Invalid value '{value}' for sort direction, use 'asc' or 'desc' (case insensitive)"
            )

        return direction

    @classmethod
    def from_optional_string(cls, value: str | None) -> "Direction | None":
        if value is None:
            return None

        return DIRECTION_KEYWORDS.get(value.strip().lower())

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC


DIRECTION_KEYWORDS: dict[str, Direction] = {
    "asc": Direction.ASC,
    "ascending": Direction.ASC,
    "desc": Direction.DESC,
    "descending": Direction.DESC,
}


PROPERTY_PATH_SEPARATOR = "."


def is_valid_property(token: str | None) -> bool:
    if not isinstance(token, str):
        return False

    # Dot only tokens like "." or ".." name no property
    return bool(token.strip().replace(PROPERTY_PATH_SEPARATOR, "").strip())


@dataclass(frozen=True)
class Order:
    property: str
    direction: Direction = Direction.ASC

    def __post_init__(self):
        if not is_valid_property(self.property):
            raise InvalidSortError(f"Invalid order property '{self.property}'")

        object.__setattr__(self, "property", self.property.strip())

        if not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction.from_string(str(self.direction)))

    @property
    def is_ascending(self) -> bool:
        return self.direction.is_ascending

    @property
    def is_descending(self) -> bool:
        return self.direction.is_descending

    def with_direction(self, direction: Direction) -> "Order":
        return Order(self.property, direction)

    def reverse(self) -> "Order":
        return self.with_direction(
            Direction.DESC if self.is_ascending else Direction.ASC
        )


@dataclass(frozen=True)
class Sort:
    """
    Ordered sequence of orders, the first order having the highest precedence.

    An empty sort is "unsorted". Instances are immutable, every combining
    method returns a new sort.

    Example:
        ```python
        from fastsort.sort import Sort, Direction

        Sort.by("lastname", "firstname").and_(Sort.by("age", direction=Direction.DESC))
        ```
    """

    orders: tuple[Order, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.orders, tuple):
            object.__setattr__(self, "orders", tuple(self.orders))

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> "Sort":
        return cls(tuple(Order(prop, direction) for prop in properties))

    @classmethod
    def by_orders(cls, *orders: Order) -> "Sort":
        return cls(orders)

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return len(self.orders) > 0

    @property
    def is_unsorted(self) -> bool:
        return not self.is_sorted

    def and_(self, other: "Sort") -> "Sort":
        return Sort(self.orders + tuple(other))

    def get_order_for(self, property: str) -> Order | None:
        for order in self.orders:
            if order.property == property:
                return order

        return None

    def ascending(self) -> "Sort":
        return Sort(tuple(order.with_direction(Direction.ASC) for order in self.orders))

    def descending(self) -> "Sort":
        return Sort(tuple(order.with_direction(Direction.DESC) for order in self.orders))

    def __add__(self, other: "Sort") -> "Sort":
        if not isinstance(other, Sort):
            return NotImplemented

        return self.and_(other)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def __bool__(self) -> bool:
        return self.is_sorted


__all__ = [
    "InvalidSortError",
    "Direction",
    "DIRECTION_KEYWORDS",
    "PROPERTY_PATH_SEPARATOR",
    "is_valid_property",
    "Order",
    "Sort",
]
