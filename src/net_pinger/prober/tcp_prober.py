"""
TCP connect prober.

This module provides an implementation of the Prober interface that measures
how long it takes to establish a TCP connection with the target. The
connection is closed as soon as it is established; no data is exchanged.
"""

import asyncio
import logging
import socket
import time
from datetime import timedelta
from typing import Any, Optional

from net_pinger.contracts import Prober
from net_pinger.domain import ProbeOutcome, Target

# Module logger
logger = logging.getLogger(__name__)


def describe_connection(writer: asyncio.StreamWriter) -> Optional[str]:
    """
    Builds a diagnostic string for an established connection.

    The string names the peer address and, when the platform exposes it,
    the TTL (or IPv6 hop limit) set on the local socket. This is the
    outgoing TTL, not the one of packets received from the peer.

    Args:
        writer: The stream writer of the established connection.

    Returns:
        Optional[str]: e.g. "93.184.216.34:80 local_ttl=64", or None if the peer is unknown.
    """
    peer: Any = writer.get_extra_info("peername")
    if not peer:
        return None
    diagnostic = f"{peer[0]}:{peer[1]}"

    sock = writer.get_extra_info("socket")
    ttl = _socket_ttl(sock) if sock is not None else None
    if ttl is not None:
        diagnostic += f" local_ttl={ttl}"
    return diagnostic


def _socket_ttl(sock: Any) -> Optional[int]:
    """Reads the unicast TTL or hop limit of a socket, None when unavailable."""
    if sock.family == socket.AF_INET:
        level, option = socket.IPPROTO_IP, socket.IP_TTL
    elif sock.family == socket.AF_INET6 and hasattr(socket, "IPV6_UNICAST_HOPS"):
        level, option = socket.IPPROTO_IPV6, socket.IPV6_UNICAST_HOPS
    else:
        return None
    try:
        return sock.getsockopt(level, option)
    except OSError:
        return None


class TcpProber(Prober):
    """
    A concrete implementation of Prober that opens a TCP connection.

    A probe succeeds when the connection is established within the target's
    timeout. Timeouts, refused connections and resolution failures are
    reported as unsuccessful outcomes.
    """

    async def probe(self, target: Target) -> ProbeOutcome:
        """
        Connects to the target's host and port and measures the connect time.

        Args:
            target: The Target to connect to.

        Returns:
            ProbeOutcome: The outcome of the connection attempt.
        """
        logger.debug(f"Connecting to {target}")
        start_time: float = time.perf_counter()
        writer: Optional[asyncio.StreamWriter] = None

        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(target.host, target.port),
                timeout=target.timeout.total_seconds(),
            )
            elapsed = timedelta(seconds=time.perf_counter() - start_time)
            return ProbeOutcome(success=True, elapsed=elapsed, diagnostic=describe_connection(writer))

        except (asyncio.TimeoutError, OSError) as e:
            elapsed = timedelta(seconds=time.perf_counter() - start_time)
            logger.debug(f"Connection to {target} failed: {e!r}")
            return ProbeOutcome(success=False, elapsed=elapsed, error=e)

        finally:
            if writer is not None:
                writer.close()
                try:
                    await writer.wait_closed()
                except OSError as e:
                    logger.debug(f"Error closing connection to {target}: {e!r}")
