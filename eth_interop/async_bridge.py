"""Bridge ``callback(error, result)`` host calls to asyncio.

Host operations report completion through a callback.
Here we turn that into

- an :py:class:`asyncio.Queue` sink receiving exactly one ``(error, result)`` tuple,
  see :py:func:`create_async_fn`

- a coroutine returning the result or raising :py:class:`HostError`,
  see :py:func:`call_awaitable`

The host may fire the callback from its own networking thread.
The message is then handed over to the event loop that owns the sink.

Example:

.. code-block:: python

    from eth_interop import async_eth

    error, accounts = await async_eth.get_accounts(web3).get()

"""

import asyncio
import functools
import logging
import threading
from typing import Any, Callable, Optional

from eth_interop.dispatch import call

logger = logging.getLogger(__name__)


class HostError(Exception):
    """The host operation reported a failure.

    The error object from the host, untouched, is available as :py:attr:`error`.
    """

    def __init__(self, error: Any):
        super().__init__(f"Host operation failed: {error}")
        self.error = error


def _get_running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def make_completion_callback(sink: asyncio.Queue) -> Callable[[Any, Any], None]:
    """Create a callback that puts one ``(error, result)`` tuple to `sink`.

    - Only the first completion is delivered, later calls are logged and dropped

    - Calls from threads other than the sink's event loop thread
      are scheduled with :py:meth:`asyncio.AbstractEventLoop.call_soon_threadsafe`
    """
    loop = _get_running_loop()
    lock = threading.Lock()
    completed = False

    def _callback(err=None, res=None):
        nonlocal completed
        with lock:
            already_completed = completed
            completed = True

        if already_completed:
            logger.warning("Host completed the same call twice, dropping error:%s result:%s", err, res)
            return

        message = (err, res)
        if loop is None or _get_running_loop() is loop:
            sink.put_nowait(message)
        else:
            loop.call_soon_threadsafe(sink.put_nowait, message)

    return _callback


def create_async_fn(func: Callable) -> Callable[..., asyncio.Queue]:
    """Turn a function taking a trailing completion callback into one returning a sink.

    If the first argument is an :py:class:`asyncio.Queue` it is used as the sink,
    otherwise a new queue is created. The queue is returned immediately and
    receives one ``(error, result)`` tuple when the host completes.

    Example:

    .. code-block:: python

        from eth_interop import eth
        from eth_interop.async_bridge import create_async_fn

        get_balance = create_async_fn(eth.get_balance)
        error, balance = await get_balance(web3, address).get()

    :param func:
        Function whose last positional argument is ``callback(error, result)``

    :return:
        Wrapped function
    """

    @functools.wraps(func)
    def _async_fn(*args) -> asyncio.Queue:
        if args and isinstance(args[0], asyncio.Queue):
            sink, args = args[0], args[1:]
        else:
            sink = asyncio.Queue()

        func(*args, make_completion_callback(sink))
        return sink

    return _async_fn


async def call_awaitable(obj: Any, name: str, *args) -> Any:
    """Call a callback based host method and wait for the result.

    :param obj:
        Host object

    :param name:
        Method name, kebab-case or camelCase

    :param args:
        Positional arguments, without the callback

    :return:
        The translated result

    :raise HostError:
        The host passed an error to the callback
    """
    sink = asyncio.Queue()
    call(obj, name, [*args, make_completion_callback(sink)])
    err, res = await sink.get()
    if err is not None:
        raise HostError(err)
    return res
