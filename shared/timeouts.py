"""
Timeout guard for data-loading call sites.

Screens that load a combined feed race it against a fixed interval so a
stalled network never keeps the loading indicator up forever. On timeout
the caller gets its default data instead of an error.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_timeout(awaitable: Awaitable[T], timeout: float, default: T, label: str = "request") -> T:
    """
    Await `awaitable`, returning `default` if it does not finish in time.

    Args:
        awaitable: The load to guard (usually an asyncio.gather of reads)
        timeout: Seconds to wait
        default: Value returned on timeout
        label: Name used in the log line

    Returns:
        The awaited result, or `default` on timeout
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{label} timed out after {timeout:.1f}s, using defaults")
        return default
