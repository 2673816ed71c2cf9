# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from functools import lru_cache
from typing import Any

from fastapi import Depends
from fastapi.params import Query

from fastsort.config import get_settings
from fastsort.params.default import SortDefault, SortDefaultInput, SortParameter
from fastsort.params.resolver import SortParameterResolver
from fastsort.sort import Direction, InvalidSortError, Sort


class SortQuery(Query):
    def __init__(self, alias: str | None = None):
        super().__init__(
            default=None,
            alias=alias,
            title="Sort",
            description="Sort the list of items by properties followed by an optional direction, repeat the parameter to add sorts (ex. 'sort=lastname,firstname,asc&sort=age,desc')",
        )


@lru_cache
def get_sort_resolver() -> SortParameterResolver:
    return SortParameterResolver.from_settings(get_settings())


def SortDepends(
    *properties: str,
    direction: Direction = Direction.ASC,
    default: SortDefaultInput = None,
    qualifier: str | None = None,
) -> Any:
    """
    Use in FastAPI signatures: sort: Sort = SortDepends("lastname", "firstname")

    The query parameter name is computed when the dependency is declared,
    "<qualifier>_sort" when a qualifier is given. Call init_settings before
    declaring routes, later settings only change the resolver used per request.
    """
    if properties and default is not None:
        raise InvalidSortError(
            "Define the default sort either with properties or with the default argument, not both"
        )

    if properties:
        default = SortDefault(properties, direction)

    parameter = SortParameter(qualifier=qualifier, default=default)
    name = get_sort_resolver().get_sort_parameter(qualifier)

    def resolve_sort(
        values: list[str] | None = SortQuery(alias=name),
        resolver: SortParameterResolver = Depends(get_sort_resolver),
    ) -> Sort:
        return resolver.resolve(
            values,
            qualifier=parameter.qualifier,
            fallback=parameter.default_sort,
        )

    return Depends(resolve_sort)


__all__ = [
    "SortQuery",
    "get_sort_resolver",
    "SortDepends",
]
