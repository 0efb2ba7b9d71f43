"""Kernel value types – public re-export surface.

Modules:
  ids.py    – UniqueEntityID
  result.py – Ok, Err, Result and helpers
  option.py – Some, Nothing, Option and helpers
"""

from univ_admin.kernel.types.ids import UniqueEntityID
from univ_admin.kernel.types.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    all_options,
    combine_options,
    from_nullable,
    nothing,
    some,
)
from univ_admin.kernel.types.result import (
    Err,
    Ok,
    Result,
    all_results,
    combine_results,
    err,
    from_awaitable,
    from_throwable,
    ok,
)

__all__ = [
    "NOTHING",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UniqueEntityID",
    "all_options",
    "all_results",
    "combine_options",
    "combine_results",
    "err",
    "from_awaitable",
    "from_nullable",
    "from_throwable",
    "nothing",
    "ok",
    "some",
]
