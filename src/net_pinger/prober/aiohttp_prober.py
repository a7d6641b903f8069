"""
HTTP prober implementation using the aiohttp library.

This module provides an implementation of the Prober interface that uses
the aiohttp library to issue GET requests against HTTP and HTTPS targets.
It handles timing and error handling of a single request.
"""

import logging
import time
from datetime import timedelta
from typing import Optional

import aiohttp

from net_pinger.contracts import Prober
from net_pinger.domain import ProbeOutcome, Target

# Module logger
logger = logging.getLogger(__name__)


def is_success_status(status_code: int) -> bool:
    """
    Checks whether an HTTP status code counts as a successful probe.

    Args:
        status_code: The HTTP status code of the final response.

    Returns:
        bool: True for 2xx responses, False otherwise.
    """
    return 200 <= status_code < 300


class AiohttpProber(Prober):
    """
    A concrete implementation of Prober using the aiohttp library.

    This class handles the entire lifecycle of a single HTTP probe, including
    timing and error handling. It uses a shared aiohttp ClientSession for
    optimal performance across the probes of a session.
    """

    def __init__(self, session: aiohttp.ClientSession, allow_redirects: bool = True) -> None:
        """
        Initializes the prober with a shared aiohttp ClientSession.

        Args:
            session: An active aiohttp.ClientSession to be used for requests.
            allow_redirects: Whether redirects are followed before judging the status.
        """
        self._session: aiohttp.ClientSession = session
        self._allow_redirects: bool = allow_redirects

    async def probe(self, target: Target) -> ProbeOutcome:
        """
        Performs a GET request to the target's URL.

        This method captures the response time and status line. Non-2xx
        responses, timeouts and client errors are unsuccessful outcomes.

        Args:
            target: The Target to request.

        Returns:
            ProbeOutcome: The outcome of the request, with the HTTP status line
                as diagnostic when a response was received.
        """
        logger.debug(f"Starting GET for target: {target.url}")
        error: Optional[Exception] = None
        diagnostic: Optional[str] = None
        success: bool = False
        start_time: float = time.perf_counter()

        try:
            async with self._session.get(
                target.url,
                timeout=aiohttp.ClientTimeout(total=target.timeout.total_seconds()),
                allow_redirects=self._allow_redirects,
            ) as response:
                status_code: int = response.status
                diagnostic = (
                    f"HTTP/{response.version.major}.{response.version.minor} "
                    f"{status_code} {response.reason or ''}"
                ).rstrip()
                success = is_success_status(status_code)

        except Exception as e:
            error = e
            logger.debug(f"Error requesting {target.url}: {e!r}")

        elapsed = timedelta(seconds=time.perf_counter() - start_time)
        if success:
            logger.debug(f"Successfully requested {target.url} in {elapsed.total_seconds():.3f}s")

        return ProbeOutcome(success=success, elapsed=elapsed, diagnostic=diagnostic, error=error)
