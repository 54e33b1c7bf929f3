from __future__ import annotations

import asyncio
from decimal import Decimal

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer, unused_port

from vehicle_catalog._transport import JsonTransport
from vehicle_catalog.exceptions import LookupTransportError


async def _price(_request: web.Request) -> web.Response:
    # Raw text so the amount keeps its trailing zeros on the wire.
    return web.Response(text='{"currency": "USD", "price": 20000.00}', content_type="application/json")


async def _echo_query(request: web.Request) -> web.Response:
    return web.json_response(dict(request.query))


async def _unavailable(_request: web.Request) -> web.Response:
    return web.Response(status=503, text="pricing is down")


async def _not_json(_request: web.Request) -> web.Response:
    return web.Response(text="<html>oops</html>", content_type="text/html")


async def _slow(_request: web.Request) -> web.Response:
    await asyncio.sleep(1.0)
    return web.json_response({})


async def _bad_utf8(_request: web.Request) -> web.Response:
    return web.Response(body=b'{"currency": "\xff\xfe"}', headers={"Content-Type": "application/json; charset=utf-8"})


async def _unknown_charset(_request: web.Request) -> web.Response:
    return web.Response(body=b'{"currency": "USD"}', headers={"Content-Type": "application/json; charset=x-no-such"})


def _app() -> web.Application:
    app = web.Application()
    app.router.add_get("/price", _price)
    app.router.add_get("/echo", _echo_query)
    app.router.add_get("/unavailable", _unavailable)
    app.router.add_get("/not-json", _not_json)
    app.router.add_get("/slow", _slow)
    app.router.add_get("/bad-utf8", _bad_utf8)
    app.router.add_get("/unknown-charset", _unknown_charset)
    return app


@pytest.mark.asyncio
async def test_get_json_decodes_fractions_as_decimal() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        payload = await transport.get_json(str(server.make_url("/price")))

    assert payload == {"currency": "USD", "price": Decimal("20000.00")}
    assert str(payload["price"]) == "20000.00"


@pytest.mark.asyncio
async def test_get_json_sends_query_params() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        payload = await transport.get_json(str(server.make_url("/echo")), params={"lat": "40.7", "lon": "-74.0"})

    assert payload == {"lat": "40.7", "lon": "-74.0"}


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_code() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        url = str(server.make_url("/unavailable"))
        with pytest.raises(LookupTransportError) as exc_info:
            await transport.get_json(url)

    assert exc_info.value.status_code == 503
    assert exc_info.value.endpoint == url
    assert "pricing is down" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_route_raises() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        with pytest.raises(LookupTransportError) as exc_info:
            await transport.get_json(str(server.make_url("/prices/1")))

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_invalid_json_raises() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        with pytest.raises(LookupTransportError, match="Invalid JSON"):
            await transport.get_json(str(server.make_url("/not-json")))


@pytest.mark.asyncio
async def test_timeout_raises() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=0.05)
        with pytest.raises(LookupTransportError) as exc_info:
            await transport.get_json(str(server.make_url("/slow")))

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_connection_refused_raises() -> None:
    url = f"http://127.0.0.1:{unused_port()}/prices/1"

    async with aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        with pytest.raises(LookupTransportError) as exc_info:
            await transport.get_json(url)

    assert exc_info.value.endpoint == url
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/bad-utf8", "/unknown-charset"])
async def test_undecodable_body_raises(path: str) -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = JsonTransport(session, timeout=2.0)
        url = str(server.make_url(path))
        with pytest.raises(LookupTransportError) as exc_info:
            await transport.get_json(url)

    assert exc_info.value.endpoint == url
    assert isinstance(exc_info.value.__cause__, (UnicodeDecodeError, LookupError))
