# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from pydantic import BaseModel, computed_field

from fastsort.sort import Direction, Order, Sort


class OrderSchema(BaseModel):
    property: str
    direction: Direction = Direction.ASC

    @classmethod
    def from_order(cls, order: Order) -> "OrderSchema":
        return cls(property=order.property, direction=order.direction)

    def to_order(self) -> Order:
        return Order(self.property, self.direction)


class SortSchema(BaseModel):
    """
    Schema of a resolved sort, to echo it in API responses.

    Example:
        ```python
        SortSchema.from_sort(Sort.by("name")).model_dump(mode="json")
        ```

    Gives:
        {"orders": [{"property": "name", "direction": "asc"}], "sorted": true}
    """

    orders: list[OrderSchema] = []

    @computed_field
    @property
    def sorted(self) -> bool:
        return len(self.orders) > 0

    @classmethod
    def from_sort(cls, sort: Sort) -> "SortSchema":
        return cls(orders=[OrderSchema.from_order(order) for order in sort])

    def to_sort(self) -> Sort:
        return Sort.by_orders(*(order.to_order() for order in self.orders))


__all__ = [
    "OrderSchema",
    "SortSchema",
]
