from __future__ import annotations

import asyncio

import pytest

from src.domain.entities.probe import ProbeErrorKind
from src.infrastructure.probes import ProbeRejectedError, TcpProbe
from src.infrastructure.probes.base import BaseProbe


class _SlowProbe(BaseProbe):
    name = "slow"

    async def _handshake(self, host, port, timeout, credentials) -> None:
        await asyncio.sleep(10)


class _RefusingProbe(BaseProbe):
    name = "refusing"

    async def _handshake(self, host, port, timeout, credentials) -> None:
        raise ProbeRejectedError("bad password")


@pytest.mark.asyncio
async def test_tcp_probe_succeeds_on_listening_port(tcp_listener) -> None:
    result = await TcpProbe().probe("127.0.0.1", tcp_listener, 1.0)

    assert result.succeeded is True
    assert result.error_detail is None
    assert result.latency_ms is not None


@pytest.mark.asyncio
async def test_tcp_probe_reports_closed_port_as_unreachable(unused_port) -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()

    result = await TcpProbe().probe("127.0.0.1", unused_port, 1.0)

    assert loop.time() - start < 1.2
    assert result.succeeded is False
    assert result.error_kind is ProbeErrorKind.UNREACHABLE
    assert result.error_detail.startswith("Could not reach host")


@pytest.mark.asyncio
async def test_tcp_connect_to_port_one_fails_within_timeout() -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()

    result = await TcpProbe().probe("127.0.0.1", 1, 1.0)

    assert loop.time() - start < 1.2
    assert result.succeeded is False
    assert result.error_kind is ProbeErrorKind.UNREACHABLE


@pytest.mark.asyncio
async def test_empty_host_fails_without_connecting() -> None:
    result = await TcpProbe().probe("", 53, 1.0)

    assert result.succeeded is False
    assert "no address" in result.error_detail


@pytest.mark.asyncio
async def test_probe_is_bounded_by_timeout() -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()

    result = await _SlowProbe().probe("10.255.255.1", 80, 0.05)

    assert loop.time() - start < 1.0
    assert result.error_detail == "Could not reach host: timed out after 0.05s"


@pytest.mark.asyncio
async def test_rejection_is_reported_separately() -> None:
    result = await _RefusingProbe().probe("mysql", 3306, 1.0)

    assert result.error_kind is ProbeErrorKind.REJECTED
    assert result.error_detail == "Host rejected connection: bad password"
