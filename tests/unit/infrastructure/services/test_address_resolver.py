from __future__ import annotations

import asyncio
import socket

import pytest

from src.infrastructure.services import DnsAddressResolver


@pytest.mark.asyncio
async def test_resolves_ip_literal() -> None:
    assert await DnsAddressResolver().resolve("127.0.0.1") == "127.0.0.1"


@pytest.mark.asyncio
async def test_lookup_failure_returns_none(monkeypatch) -> None:
    async def _fail(*args, **kwargs):
        raise socket.gaierror(-2, "Name or service not known")

    monkeypatch.setattr(asyncio.get_running_loop(), "getaddrinfo", _fail)

    assert await DnsAddressResolver(timeout=0.5).resolve("mysql") is None


@pytest.mark.asyncio
async def test_empty_hostname_is_not_looked_up() -> None:
    assert await DnsAddressResolver().resolve("") is None
