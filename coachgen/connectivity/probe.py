"""
Active reachability probe.

Sandi Metz Principles:
- Single Responsibility: Confirm or refute passive offline state
- Small methods: One endpoint per check
- Dependency Injection: Endpoints, timeouts and transport injected
"""

import asyncio
from typing import List, Optional, Sequence

import httpx

from coachgen.config import config
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)


class ReachabilityProbe:
    """
    Sequential probe over well-known endpoints.

    Returns True on the first 2xx. Failures and timeouts are answers,
    not errors.
    """

    def __init__(
        self,
        endpoints: Optional[Sequence[str]] = None,
        timeout_seconds: Optional[float] = None,
        overall_timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize probe.

        Args:
            endpoints: Ordered URLs (config default if None)
            timeout_seconds: Per-endpoint timeout
            overall_timeout_seconds: Bound on the whole probe
            transport: Optional httpx transport
        """
        self._endpoints: List[str] = list(
            endpoints if endpoints is not None else config.probe_endpoints_list
        )
        self._timeout = timeout_seconds or config.probe_timeout_seconds
        self._overall_timeout = (
            overall_timeout_seconds or config.probe_overall_timeout_seconds
        )
        self._transport = transport

    @property
    def endpoints(self) -> List[str]:
        return list(self._endpoints)

    async def probe(self) -> bool:
        """
        Check whether any endpoint is reachable.

        Returns:
            True if an endpoint answered 2xx within the timeouts
        """
        try:
            reachable = await asyncio.wait_for(
                self._probe_all(), timeout=self._overall_timeout
            )
        except asyncio.TimeoutError:
            logger.warning("Reachability probe timed out", timeout=self._overall_timeout)
            reachable = False

        logger.info("Reachability probe finished", reachable=reachable)
        return reachable

    async def _probe_all(self) -> bool:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            for endpoint in self._endpoints:
                if await self._check(client, endpoint):
                    return True
        return False

    async def _check(self, client: httpx.AsyncClient, endpoint: str) -> bool:
        """
        Check one endpoint.

        Args:
            client: HTTP client
            endpoint: URL to GET

        Returns:
            True on 2xx
        """
        try:
            response = await asyncio.wait_for(
                client.get(endpoint), timeout=self._timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
            logger.debug("Probe endpoint failed", endpoint=endpoint, error=str(e))
            return False

        logger.debug(
            "Probe endpoint answered", endpoint=endpoint, status=response.status_code
        )
        return response.is_success
