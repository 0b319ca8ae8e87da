"""Bridging of transport callbacks into awaitables.

Connection objects report completion by invoking a callback, possibly from
their own I/O thread. Each request gets a :class:`SingleShot` whose callback
resumes the waiting coroutine exactly once on the owning event loop.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from ..core.error import TransportError

logger = logging.getLogger(__name__)


class SingleShot:
    """A one-time result slot that transport callbacks can fill.

    ``set``/``fail`` are safe to call from any thread. Only the first call
    has an effect; later ones are dropped.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._future: asyncio.Future = self._loop.create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def set(self, value: Any = None) -> None:
        self._schedule(self._resolve, value)

    def fail(self, error: BaseException) -> None:
        self._schedule(self._reject, error)

    def callback(self, *args: Any) -> None:
        """Transport callback: resolves with the first argument, if any."""
        self.set(args[0] if args else None)

    def _schedule(self, fn: Callable[[Any], None], arg: Any) -> None:
        try:
            self._loop.call_soon_threadsafe(fn, arg)
        except RuntimeError:
            # loop already closed; nobody is waiting any more
            logger.debug("Dropping late transport callback", exc_info=True)

    def _resolve(self, value: Any) -> None:
        if not self._future.done():
            self._future.set_result(value)

    def _reject(self, error: BaseException) -> None:
        if not self._future.done():
            self._future.set_exception(error)

    def __await__(self):
        return self._future.__await__()


async def call(method: Callable[..., Any], *args: Any) -> Any:
    """Invoke ``method(*args, callback)`` and wait for the callback.

    Returns:
        The first argument the transport passed to the callback

    Raises:
        TransportError: If ``method`` itself raises
    """
    ack = SingleShot()
    try:
        method(*args, ack.callback)
    except Exception as e:
        raise TransportError(e) from e
    return await ack
