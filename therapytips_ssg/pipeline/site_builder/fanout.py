"""Keyed fan-out/join over independent awaitables.

A build phase issues its independent fetches together and continues only
when all of them have resolved. The first exception raised by any fetch is
propagated to the caller; fetches still in flight are not cancelled, their
results are simply discarded (``asyncio.gather`` semantics).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


async def fan_out(tasks: Mapping[str, Awaitable[Any]]) -> dict[str, Any]:
    """Await every value of ``tasks`` concurrently and return results by key.

    Examples
    --------
    >>> import asyncio
    >>> async def one():
    ...     return 1
    >>> asyncio.run(fan_out({"a": one(), "b": one()}))
    {'a': 1, 'b': 1}
    """
    keys = list(tasks)
    results = await asyncio.gather(*(tasks[key] for key in keys))
    return dict(zip(keys, results))


async def fan_out_list(tasks: Sequence[Awaitable[T]]) -> list[T]:
    """Await ``tasks`` concurrently and return results in input order."""
    return list(await asyncio.gather(*tasks))
