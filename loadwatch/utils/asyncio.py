import asyncio
from typing import Callable, TypeVar

T = TypeVar("T")


async def run_async(fn: Callable[..., T], *args) -> T:
    """Run a blocking callable in the default executor of the running loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, fn, *args)
