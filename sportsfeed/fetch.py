# sportsfeed/fetch.py
import asyncio
import json
from typing import Any, Optional

import httpx

DEFAULT_TIMEOUT_MS = 15000


class SportsFeedError(Exception):
    pass


class FetchTimeout(SportsFeedError):
    def __init__(self, url: str, timeout_ms: int):
        super().__init__(f"Timeout after {timeout_ms} ms: {url}")
        self.url = url
        self.timeout_ms = timeout_ms


class HTTPStatusFailure(SportsFeedError):
    def __init__(self, url: str, status_code: int):
        super().__init__(f"Fetch failed {status_code}: {url}")
        self.url = url
        self.status_code = status_code


class TransportFailure(SportsFeedError):
    pass


class ParseFailure(SportsFeedError):
    pass


def make_client(headers: Optional[dict] = None, timeout_ms: int = DEFAULT_TIMEOUT_MS,
                transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=headers,
        follow_redirects=True,
        timeout=timeout_ms / 1000,
        transport=transport,
    )


async def fetch(client: httpx.AsyncClient, url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> httpx.Response:
    """
    GET con plazo fijo. Si vence el plazo se lanza FetchTimeout y la
    respuesta, si llega más tarde, no se observa nunca. Sin reintentos.
    """
    try:
        # wait_for cancela la petición pendiente al vencer el plazo en vez de dejarla viva
        r = await asyncio.wait_for(client.get(url), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError:
        raise FetchTimeout(url, timeout_ms) from None
    except httpx.TimeoutException as ex:
        raise FetchTimeout(url, timeout_ms) from ex
    except httpx.HTTPError as ex:
        raise TransportFailure(f"{type(ex).__name__}: {url}: {ex}") from ex

    if not r.is_success:
        raise HTTPStatusFailure(url, r.status_code)
    return r


async def fetch_text(client: httpx.AsyncClient, url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> str:
    r = await fetch(client, url, timeout_ms)
    return r.text


async def fetch_json(client: httpx.AsyncClient, url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> Any:
    r = await fetch(client, url, timeout_ms)
    try:
        return r.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as ex:
        raise ParseFailure(f"Invalid JSON from {url}: {ex}") from ex
