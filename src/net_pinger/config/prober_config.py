"""
Prober selection for the reachability prober.

This module maps the protocol of a resolved Target to the Prober
implementation able to probe it.
"""

import logging
from typing import Optional

import aiohttp

from net_pinger.contracts import Prober
from net_pinger.domain import Protocol, Target
from net_pinger.prober.aiohttp_prober import AiohttpProber
from net_pinger.prober.tcp_prober import TcpProber

# Module logger
logger = logging.getLogger(__name__)


def create_prober(target: Target, session: Optional[aiohttp.ClientSession] = None) -> Prober:
    """
    Create the prober matching the target's protocol.

    Args:
        target: The resolved Target to probe.
        session: The shared HTTP session, required for http and https targets.

    Returns:
        Prober: A TcpProber for tcp targets, an AiohttpProber otherwise.

    Raises:
        ValueError: If an HTTP or HTTPS target is given without a session.
    """
    if target.protocol is Protocol.TCP:
        logger.debug(f"Using TCP prober for {target}")
        return TcpProber()

    if session is None:
        raise ValueError(f"An HTTP session is required to probe {target.protocol} targets.")
    logger.debug(f"Using HTTP prober for {target.url}")
    return AiohttpProber(session=session)
