"""
HTTP client configuration module for the reachability prober.

This module provides functionality to create and configure the HTTP client
session shared by every probe of an HTTP or HTTPS session.
"""

import logging

import aiohttp

from net_pinger.config.ping_context import PingContext

# Module logger
logger = logging.getLogger(__name__)


def get_http_session(context: PingContext) -> aiohttp.ClientSession:
    """
    Create and configure an HTTP client session based on the provided configuration.

    Connections are not kept alive between probes, so that every probe pays
    the full connection cost the way a fresh client would. The per-probe
    timeout is applied as the session default.

    Args:
        context: Configuration context containing the probe timeout.

    Returns:
        aiohttp.ClientSession: A configured HTTP client session.
    """
    logger.debug(f"Creating HTTP session (timeout: {context.timeout.total_seconds()}s)")
    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(force_close=True),
        timeout=aiohttp.ClientTimeout(total=context.timeout.total_seconds()),
    )
