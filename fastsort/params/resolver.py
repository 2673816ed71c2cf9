# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

import inspect
import logging

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from fastsort.params.default import SortParameter
from fastsort.sort import DEFAULT_PROPERTY_DELIMITER, Sort, parse_sort_values

if TYPE_CHECKING:
    from fastsort.config import BaseSettings


DEFAULT_PARAMETER = "sort"

DEFAULT_QUALIFIER_DELIMITER = "_"


logger = logging.getLogger("fastsort.params")


class SortParameterResolver:
    """
    Resolve the sort of a request from its query parameter values.

    Malformed values never raise: invalid properties are dropped and a request
    without any usable property resolves to the default sort of the parameter,
    or to the fallback sort of the resolver when the parameter has none.
    """

    def __init__(
        self,
        parameter_name: str = DEFAULT_PARAMETER,
        property_delimiter: str = DEFAULT_PROPERTY_DELIMITER,
        qualifier_delimiter: str = DEFAULT_QUALIFIER_DELIMITER,
        fallback_sort: Sort | None = None,
    ):
        self.parameter_name = parameter_name
        self.property_delimiter = property_delimiter
        self.qualifier_delimiter = qualifier_delimiter
        self.fallback_sort = fallback_sort or Sort.unsorted()

    @classmethod
    def from_settings(cls, settings: "BaseSettings") -> "SortParameterResolver":
        return cls(
            parameter_name=settings.sort_parameter,
            property_delimiter=settings.sort_property_delimiter,
            qualifier_delimiter=settings.sort_qualifier_delimiter,
            fallback_sort=parse_sort_values(
                settings.sort_fallback, settings.sort_property_delimiter
            ),
        )

    @staticmethod
    def supports(target_type: Any) -> bool:
        return inspect.isclass(target_type) and issubclass(target_type, Sort)

    def get_sort_parameter(self, qualifier: str | None = None) -> str:
        if qualifier:
            return f"{qualifier}{self.qualifier_delimiter}{self.parameter_name}"

        return self.parameter_name

    def resolve(
        self,
        raw_values: Iterable[str | None] | None,
        qualifier: str | None = None,
        fallback: Sort | None = None,
    ) -> Sort:
        fallback = fallback if fallback is not None else self.fallback_sort
        sort = parse_sort_values(raw_values, self.property_delimiter)

        if sort.is_unsorted:
            logger.debug(
                f"No sort found in '{self.get_sort_parameter(qualifier)}', use the default sort"
            )
            return fallback

        return sort

    def resolve_parameter(
        self,
        params: Mapping[str, Any],
        parameter: SortParameter | None = None,
    ) -> Sort:
        parameter = parameter or SortParameter()
        name = self.get_sort_parameter(parameter.qualifier)

        return self.resolve(
            get_parameter_values(params, name),
            qualifier=parameter.qualifier,
            fallback=parameter.default_sort,
        )


def get_parameter_values(params: Mapping[str, Any], name: str) -> list[str]:
    if hasattr(params, "getlist"):
        return list(params.getlist(name))

    values = params.get(name)

    if values is None:
        return []

    if isinstance(values, str):
        return [values]

    return list(values)


__all__ = [
    "DEFAULT_PARAMETER",
    "DEFAULT_QUALIFIER_DELIMITER",
    "SortParameterResolver",
    "get_parameter_values",
]
