# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from fastsort import (
    config,
    logger,
    params,
    schemas,
    sort,
)

__all__ = [
    "config",
    "logger",
    "params",
    "schemas",
    "sort",
]
