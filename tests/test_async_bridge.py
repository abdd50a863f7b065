"""Callbacks to asyncio queues and awaitables."""

import asyncio
import threading

import pytest

from eth_interop.async_bridge import HostError, call_awaitable, create_async_fn, make_completion_callback
from eth_interop.dispatch import call


class AnswerHost:
    """Host completing with a fixed value."""

    def getAnswer(self, callback):
        callback(None, 42)

    def getResult(self, callback):
        callback(None, {"resultCode": 1})

    def getFailure(self, callback):
        callback({"code": -32000, "message": "insufficient funds"}, None)


def get_answer(host, callback):
    return call(host, "get-answer", [callback])


@pytest.mark.asyncio
async def test_fresh_sink_gets_one_message():
    """No sink given: a new queue is returned and receives exactly one message."""
    get_answer_async = create_async_fn(get_answer)
    sink = get_answer_async(AnswerHost())

    assert isinstance(sink, asyncio.Queue)
    assert await sink.get() == (None, 42)
    assert sink.empty()


@pytest.mark.asyncio
async def test_given_sink_is_reused():
    get_answer_async = create_async_fn(get_answer)
    sink = asyncio.Queue()

    returned = get_answer_async(sink, AnswerHost())
    assert returned is sink
    get_answer_async(sink, AnswerHost())

    assert await sink.get() == (None, 42)
    assert await sink.get() == (None, 42)
    assert sink.empty()


@pytest.mark.asyncio
async def test_callback_from_host_thread(web3):
    """Host completing from its own thread still reaches the queue."""
    get_hashrate = create_async_fn(lambda w3, callback: call(w3.eth, "get-hashrate", [callback]))
    sink = get_hashrate(web3)
    err, res = await asyncio.wait_for(sink.get(), timeout=5)
    assert err is None
    assert res == 42


@pytest.mark.asyncio
async def test_second_completion_dropped(web3):
    """Host calling back twice does not produce a second message."""
    is_mining = create_async_fn(lambda w3, callback: call(w3.eth, "is-mining", [callback]))
    sink = is_mining(web3)
    assert await sink.get() == (None, False)
    assert sink.empty()


def test_completion_without_event_loop():
    """Synchronous hosts work without a running loop."""
    sink = asyncio.Queue()
    callback = make_completion_callback(sink)
    callback(None, "0x01")
    assert sink.get_nowait() == (None, "0x01")
    assert sink.empty()


@pytest.mark.asyncio
async def test_call_awaitable_result_translated():
    assert await call_awaitable(AnswerHost(), "get-answer") == 42
    assert await call_awaitable(AnswerHost(), "get-result") == {"result-code": 1}


@pytest.mark.asyncio
async def test_call_awaitable_host_error():
    """Host errors are raised with the host error object attached, untranslated."""
    with pytest.raises(HostError) as exc_info:
        await call_awaitable(AnswerHost(), "get-failure")

    assert exc_info.value.error == {"code": -32000, "message": "insufficient funds"}


@pytest.mark.asyncio
async def test_call_awaitable_missing_method():
    with pytest.raises(LookupError):
        await call_awaitable(AnswerHost(), "get-question")


@pytest.mark.asyncio
async def test_concurrent_completions_deliver_one_message():
    """Host threads racing to complete the same call produce one message."""
    sink = asyncio.Queue()
    callback = make_completion_callback(sink)
    barrier = threading.Barrier(8)

    def _complete(i):
        barrier.wait()
        callback(None, i)

    threads = [threading.Thread(target=_complete, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    err, res = await sink.get()
    assert err is None
    assert res in range(8)

    # Let any further scheduled puts run
    await asyncio.sleep(0)
    assert sink.empty()
