# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from fastsort.params.default import (
    SortDefault,
    SortDefaultInput,
    SortParameter,
    to_default_sort,
)

from fastsort.params.resolver import (
    DEFAULT_PARAMETER,
    DEFAULT_QUALIFIER_DELIMITER,
    SortParameterResolver,
    get_parameter_values,
)

from fastsort.params.sort import (
    SortQuery,
    get_sort_resolver,
    SortDepends,
)


__all__ = [
    # Default
    "SortDefault",
    "SortDefaultInput",
    "SortParameter",
    "to_default_sort",
    # Resolver
    "DEFAULT_PARAMETER",
    "DEFAULT_QUALIFIER_DELIMITER",
    "SortParameterResolver",
    "get_parameter_values",
    # FastAPI
    "SortQuery",
    "get_sort_resolver",
    "SortDepends",
]
