# geocountry/fetch.py
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional
from httpx import AsyncClient
from geocountry.config import settings

logger = logging.getLogger("fetch")

FetchJSON = Callable[[str], Awaitable[Any]]
JSONCallback = Callable[[Any, Any], None]
CallbackFetcher = Callable[[str, JSONCallback], None]


class CallbackError(Exception):
    """A callback-style fetcher reported an error that is not an exception."""

    def __init__(self, error: Any):
        super().__init__(f"Fetch failed: {error!r}")
        self.error = error


async def fetch_json(url: str, timeout: Optional[float] = None) -> Any:
    """GET a URL and return the parsed JSON body.

    Non-2xx responses raise httpx.HTTPStatusError, a non-JSON body raises
    json.JSONDecodeError. Nothing is caught here.
    """
    if timeout is None:
        timeout = settings.request_timeout
    async with AsyncClient(timeout=timeout) as client:
        resp = await client.get(url)
        logger.debug(f"GET {url} [{resp.status_code}]")
        resp.raise_for_status()
        return resp.json()


def from_callback(fetcher: CallbackFetcher) -> FetchJSON:
    """Wrap a ``fetcher(url, callback)`` that reports via ``callback(error, response)``.

    The first callback invocation settles the result; any later one is dropped,
    as is one arriving after the awaiting coroutine was cancelled. Exceptions
    passed as ``error`` are raised unchanged, any other truthy value is raised
    as ``CallbackError``.
    """
    async def _fetch(url: str) -> Any:
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def _settle(error: Any, response: Any = None) -> None:
            if future.cancelled():
                logger.debug(f"Dropping callback for {url} after cancellation")
                return
            if future.done():
                logger.warning(f"Ignoring repeated callback for {url}")
                return
            if error:
                if not isinstance(error, BaseException):
                    error = CallbackError(error)
                future.set_exception(error)
            else:
                future.set_result(response)

        def callback(error: Any, response: Any = None) -> None:
            # May be invoked from another thread by callback-style clients
            try:
                running = asyncio.get_running_loop()
            except RuntimeError:
                running = None
            if running is loop:
                _settle(error, response)
                return
            if loop.is_closed():
                logger.debug(f"Dropping callback for {url}, event loop is closed")
                return
            try:
                loop.call_soon_threadsafe(_settle, error, response)
            except RuntimeError:
                # closed between the check and the call
                logger.debug(f"Dropping callback for {url}, event loop is closed")

        fetcher(url, callback)
        return await future

    return _fetch
