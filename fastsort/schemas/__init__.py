# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from fastsort.schemas.sort import (
    OrderSchema,
    SortSchema,
)


__all__ = [
    "OrderSchema",
    "SortSchema",
]
