from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable

from typeverify.core.logger import get_logger
from typeverify.core.predicates import is_array

logger = get_logger(__name__)


async def _settle(transform: Callable[[Any], Any], item: Any) -> Any:
    result = transform(item)
    if inspect.isawaitable(result):
        return await result
    return result


async def map_async(items: Any, transform: Callable[[Any], Any]) -> Any:
    """
    Apply ``transform`` to every item of a list concurrently.

    All calls are scheduled at once on the running event loop and the results
    come back as a new list in the original order. ``transform`` may be an
    async function or a plain callable.

    Anything that is not a list is returned unchanged.

    The first exception raised by any call propagates as-is. Calls still in
    flight at that point are not cancelled.
    """
    if not is_array(items):
        return items

    logger.debug("Dispatching %d async calls", len(items))
    try:
        results = await asyncio.gather(*(_settle(transform, item) for item in items))
    except Exception:
        logger.debug("map_async failed", exc_info=True)
        raise
    return list(results)
