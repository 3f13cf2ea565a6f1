"""Test reachability probe."""

import asyncio
from typing import List

import httpx
import pytest

from coachgen.connectivity.probe import ReachabilityProbe


class RecordingTransport(httpx.AsyncBaseTransport):
    """Transport answering each host with a fixed status or exception."""

    def __init__(self, answers: dict):
        self._answers = answers
        self.urls: List[str] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.urls.append(url)
        answer = self._answers.get(url, httpx.UnsupportedProtocol(url))
        if isinstance(answer, Exception):
            raise answer
        if answer == "hang":
            await asyncio.sleep(10)
        return httpx.Response(answer, request=request)


A = "https://probe.test/a"
B = "https://probe.test/b"


class TestReachabilityProbe:
    """Test ReachabilityProbe class."""

    @pytest.mark.asyncio
    async def test_first_success_short_circuits(self):
        """Test probing stops at the first 2xx."""
        transport = RecordingTransport({A: 204, B: 200})
        probe = ReachabilityProbe([A, B], transport=transport)

        assert await probe.probe() is True
        assert transport.urls == [A]

    @pytest.mark.asyncio
    async def test_falls_through_failures(self):
        """Test non-2xx and transport errors move to the next endpoint."""
        transport = RecordingTransport({A: httpx.ConnectError("down"), B: 200})
        probe = ReachabilityProbe([A, B], transport=transport)

        assert await probe.probe() is True
        assert transport.urls == [A, B]

    @pytest.mark.asyncio
    async def test_all_fail(self):
        """Test unreachable when no endpoint answers 2xx."""
        transport = RecordingTransport({A: 503, B: httpx.ReadTimeout("slow")})
        probe = ReachabilityProbe([A, B], transport=transport)

        assert await probe.probe() is False

    @pytest.mark.asyncio
    async def test_per_endpoint_timeout(self):
        """Test a hanging endpoint is abandoned after its timeout."""
        transport = RecordingTransport({A: "hang", B: 200})
        probe = ReachabilityProbe(
            [A, B], timeout_seconds=0.05, overall_timeout_seconds=5.0, transport=transport
        )

        assert await probe.probe() is True
        assert transport.urls == [A, B]

    @pytest.mark.asyncio
    async def test_overall_timeout(self):
        """Test the whole probe is bounded."""
        transport = RecordingTransport({A: "hang", B: "hang"})
        probe = ReachabilityProbe(
            [A, B], timeout_seconds=1.0, overall_timeout_seconds=0.05, transport=transport
        )

        assert await probe.probe() is False

    @pytest.mark.asyncio
    async def test_invalid_endpoint(self):
        """Test malformed URLs count as unreachable."""
        transport = RecordingTransport({B: 200})
        probe = ReachabilityProbe(["http://[invalid", B], transport=transport)

        assert await probe.probe() is True

    @pytest.mark.asyncio
    async def test_no_endpoints(self):
        assert await ReachabilityProbe([]).probe() is False

    def test_endpoints_from_config(self, test_config, monkeypatch):
        """Test default endpoints come from configuration."""
        monkeypatch.setattr("coachgen.connectivity.probe.config", test_config)

        assert ReachabilityProbe().endpoints == [A, B]
