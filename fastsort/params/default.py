# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from dataclasses import dataclass, field
from typing import Sequence

from fastsort.sort import Direction, Sort, merge_sorts


@dataclass(frozen=True)
class SortDefault:
    """Default sort of a parameter, used when the request gives no usable sort."""

    sort: tuple[str, ...] = field(default_factory=tuple)
    direction: Direction = Direction.ASC

    def __post_init__(self):
        if isinstance(self.sort, str):
            object.__setattr__(self, "sort", (self.sort,))
        elif not isinstance(self.sort, tuple):
            object.__setattr__(self, "sort", tuple(self.sort))

    def to_sort(self) -> Sort:
        return Sort.by(*self.sort, direction=self.direction)


SortDefaultInput = Sort | SortDefault | Sequence[SortDefault] | None


@dataclass(frozen=True)
class SortParameter:
    qualifier: str | None = None
    default: SortDefaultInput = None

    @property
    def default_sort(self) -> Sort | None:
        sort = to_default_sort(self.default)

        return sort if sort.is_sorted else None


def to_default_sort(default: SortDefaultInput) -> Sort:
    if default is None:
        return Sort.unsorted()

    if isinstance(default, Sort):
        return default

    if isinstance(default, SortDefault):
        return default.to_sort()

    return merge_sorts(*(item.to_sort() for item in default))


__all__ = [
    "SortDefault",
    "SortDefaultInput",
    "SortParameter",
    "to_default_sort",
]
