"""
Main entry point for the reachability prober.

This module resolves the requested target, sets up logging and the prober,
runs a ping session and prints the final statistics report. A Ctrl+C stops
the session early; the report of the probes issued so far is still printed.
"""

import asyncio
import logging
import sys
from typing import Optional

import aiohttp

from net_pinger.config import PingContext, get_context
from net_pinger.config.http_config import get_http_session
from net_pinger.config.logging_config import configure_logging
from net_pinger.config.prober_config import create_prober
from net_pinger.domain import Protocol, Target
from net_pinger.errors import ResolveError
from net_pinger.processor.console_processor import ConsoleProcessor
from net_pinger.processor.delegating_processor import DelegatingResultProcessor
from net_pinger.processor.logging_processor import LoggingProcessor
from net_pinger.resolver import resolve
from net_pinger.session import PingSession

# Exit status for an address that cannot be probed, matching argparse usage errors
EXIT_INVALID_TARGET = 2


def build_target(context: PingContext) -> Target:
    """
    Resolve the configured address into a Target.

    In HTTP mode, addresses without a scheme are probed over plain HTTP.

    Args:
        context: Configuration context containing the address and probe settings.

    Returns:
        Target: The resolved target.

    Raises:
        ResolveError: If the address is malformed or uses an unsupported protocol.
    """
    return resolve(
        context.address,
        counter=context.counter,
        interval=context.interval,
        timeout=context.timeout,
        port=context.port,
        default_protocol=Protocol.HTTP if context.http_mode else Protocol.TCP,
    )


async def main(context: PingContext) -> int:
    """
    Set up and run a ping session.

    Args:
        context: Configuration context containing all application settings.

    Returns:
        int: The process exit status.
    """
    logger: logging.Logger = logging.getLogger(__name__)

    try:
        target: Target = build_target(context)
    except ResolveError as e:
        logger.error(f"Invalid target: {e}")
        print(f"net-pinger: {e}", file=sys.stderr)
        return EXIT_INVALID_TARGET

    http_session: Optional[aiohttp.ClientSession] = None
    if target.protocol is not Protocol.TCP:
        http_session = get_http_session(context)
        logger.info("configured: http_session")

    session = PingSession(
        target=target,
        prober=create_prober(target, http_session),
        processor=DelegatingResultProcessor([ConsoleProcessor(), LoggingProcessor()]),
    )

    try:
        logger.info("Session initialized. Starting probing loop...")
        await session.start()
    except asyncio.CancelledError:
        logger.info("Session interrupted.")
        session.stop()
    finally:
        print()
        print(session.result.render())
        if http_session:
            await http_session.close()
        logger.info("Shutdown complete.")

    return 0


def run() -> None:
    """Console script entry point."""
    exit_code = 0
    try:
        # Parse command-line arguments and environment variables
        context: PingContext = get_context()

        # Configure logging based on the context
        configure_logging(context)

        # Run the main application
        exit_code = asyncio.run(main(context))
    except KeyboardInterrupt:
        logging.info("Shutdown initiated by user (Ctrl+C).")
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
