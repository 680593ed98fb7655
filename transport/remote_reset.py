"""Optional HTTP reset call, kept apart from the relay protocol."""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp

DEFAULT_RESET_URL = "http://ipkiss.pragmazero.com/reset"
DEFAULT_RESET_TIMEOUT_SECONDS = 30.0
CHUNK_SIZE = 4096


class RemoteResetError(RuntimeError):
    """Raised when the reset endpoint cannot be reached."""


async def post_reset(
    url: str = DEFAULT_RESET_URL,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_RESET_TIMEOUT_SECONDS,
) -> tuple[int, str]:
    """POST to the reset endpoint and return (status, body text)."""

    owns_session = session is None
    if session is None:
        session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout)
        )

    try:
        async with session.post(url, allow_redirects=True) as response:
            body = bytearray()
            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                body.extend(chunk)
            return response.status, body.decode("utf-8", errors="replace")
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise RemoteResetError(f"{type(exc).__name__}: {exc}") from exc
    finally:
        if owns_session:
            await session.close()


def perform_remote_reset(
    url: str = DEFAULT_RESET_URL,
    *,
    log_fn=print,
    timeout: float = DEFAULT_RESET_TIMEOUT_SECONDS,
) -> bool:
    """Run the reset call to completion. Failures are logged, never raised."""

    try:
        status, body = asyncio.run(post_reset(url, timeout=timeout))
    except RemoteResetError as exc:
        log_fn(f"remote reset failed: {exc}")
        return False

    log_fn(f"Data:[{body}] Ret:[{status}]")
    return True
