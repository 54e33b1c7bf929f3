"""HTTP transport for the pricing and maps lookups."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Protocol

import aiohttp

from vehicle_catalog.exceptions import LookupTransportError

_logger = logging.getLogger(__name__)

_ACCEPT_JSON = {"accept": "application/json"}


class Transport(Protocol):
    """Structural transport interface used by the lookup clients.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`JsonTransport`) concrete.
    """

    async def get_json(self, url: str, *, params: Mapping[str, str] | None = None) -> Any:
        ...


class JsonTransport:
    """GET-only JSON transport on a shared :class:`aiohttp.ClientSession`.

    Every failure mode (connection error, timeout, non-2xx status, body that
    is not JSON) surfaces as :class:`LookupTransportError`.
    """

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_json(self, url: str, *, params: Mapping[str, str] | None = None) -> Any:
        """GET *url* and return the decoded JSON body.

        JSON numbers with a fraction are decoded as :class:`~decimal.Decimal`.
        """
        _logger.debug("GET %s params=%s", url, dict(params) if params else None)

        try:
            async with self._http.get(url, params=params, headers=_ACCEPT_JSON, timeout=self._timeout) as resp:
                body = await resp.read()
                charset = resp.charset or "utf-8"
                if not 200 <= resp.status < 300:
                    raise LookupTransportError(
                        f"HTTP {resp.status} from {url}: {body[:200].decode(charset, errors='replace')}",
                        status_code=resp.status,
                        endpoint=url,
                    )
        except LookupTransportError:
            raise
        except LookupError as exc:
            raise LookupTransportError(f"Unknown charset in response from {url}: {exc}", endpoint=url) from exc
        except TimeoutError as exc:
            raise LookupTransportError(f"Request to {url} timed out", endpoint=url) from exc
        except aiohttp.ClientError as exc:
            raise LookupTransportError(f"Request to {url} failed: {exc}", endpoint=url) from exc

        try:
            return json.loads(body.decode(charset), parse_float=Decimal)
        except (UnicodeDecodeError, LookupError, json.JSONDecodeError) as exc:
            raise LookupTransportError(
                f"Invalid JSON from {url}: {body[:200]!r}",
                endpoint=url,
            ) from exc
