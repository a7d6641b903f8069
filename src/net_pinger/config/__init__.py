"""
Configuration module for the reachability prober.

This module provides functionality to parse command-line arguments and environment
variables to create a configuration context for a prober run. It defines
default values and help text for all configurable parameters.
"""

import argparse
import os
from datetime import timedelta
from typing import Any, Optional, Sequence
from uuid import uuid4

from net_pinger.config.constants import (
    DEFAULT_COUNTER,
    DEFAULT_HTTP_MODE,
    DEFAULT_INTERVAL,
    DEFAULT_LOGGING_CONFIG_FILE,
    DEFAULT_LOGGING_TYPE,
    DEFAULT_SESSION_ID_PREFIX,
    DEFAULT_TIMEOUT,
)
from net_pinger.config.ping_context import PingContext
from net_pinger.durations import parse_duration

LOGGING_TYPES = ("dev", "prod", "custom")


def _non_negative_int(text: str) -> int:
    """argparse type for counters, where 0 means unbounded."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or a positive integer, got {value}")
    return value


def _positive_duration(text: str) -> timedelta:
    """argparse type for intervals and timeouts."""
    try:
        value = parse_duration(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    if value <= timedelta(0):
        raise argparse.ArgumentTypeError(f"must be a positive duration, got '{text}'")
    return value


def get_context(argv: Optional[Sequence[str]] = None) -> PingContext:
    """
    Parse command-line arguments and environment variables to create a configuration context.

    For each option, it first checks for a command-line argument, then falls back
    to an environment variable, and finally uses a default value.

    Args:
        argv: Arguments to parse; sys.argv[1:] when omitted.

    Returns:
        PingContext: A configuration context object containing all parsed settings.
    """
    parser = argparse.ArgumentParser(
        prog="net-pinger",
        description="Probe a TCP, HTTP or HTTPS endpoint repeatedly and report latency statistics.",
    )

    parser.add_argument(
        "address",
        type=str,
        help="The address to probe, e.g. example.com, 10.0.0.5, tcp://db.internal:5432\n"
        "or https://example.com:8443/health. Without a scheme, tcp is used.",
    )

    parser.add_argument(
        "port",
        type=int,
        nargs="?",
        default=None,
        help="Optional port overriding the one in the address.",
    )

    parser.add_argument(
        "-c",
        "--counter",
        type=_non_negative_int,
        default=os.getenv("NET_PINGER_COUNTER", str(DEFAULT_COUNTER)),
        help="Specifies how many probes to issue, 0 meaning until interrupted.\n"
        "If not provided, the value is read from the NET_PINGER_COUNTER environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_COUNTER} is used.",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=_positive_duration,
        default=os.getenv("NET_PINGER_INTERVAL", DEFAULT_INTERVAL),
        help="Specifies the interval between probes, e.g. 500ms, 1s or 2m.\n"
        "If not provided, the value is read from the NET_PINGER_INTERVAL environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_INTERVAL} is used.",
    )

    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_duration,
        default=os.getenv("NET_PINGER_TIMEOUT", DEFAULT_TIMEOUT),
        help="Specifies the timeout of a single probe, e.g. 500ms or 2s.\n"
        "If not provided, the value is read from the NET_PINGER_TIMEOUT environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_TIMEOUT} is used.",
    )

    parser.add_argument(
        "-H",
        "--http",
        action="store_true",
        default=os.getenv("NET_PINGER_HTTP", DEFAULT_HTTP_MODE).lower() == "true",
        help="Probe addresses without a scheme over HTTP instead of TCP.\n"
        "If not provided, the value is read from the NET_PINGER_HTTP environment variable.",
    )

    parser.add_argument(
        "-sid",
        "--session-id",
        type=str,
        default=os.getenv("NET_PINGER_SESSION_ID", f"{DEFAULT_SESSION_ID_PREFIX}{uuid4()}"),
        help="Specifies the session ID added to every log record.\n"
        "If not provided, the value is read from the NET_PINGER_SESSION_ID environment variable.\n"
        f"If that is also absent, the default value will be {DEFAULT_SESSION_ID_PREFIX}uuid4().",
    )

    parser.add_argument(
        "-lt",
        "--logging-type",
        type=str.lower,
        choices=LOGGING_TYPES,
        default=os.getenv("NET_PINGER_LOGGING_TYPE", DEFAULT_LOGGING_TYPE),
        help="Specifies the logging configuration type to use (case insensitive).\n"
        "'prod' only reports problems on stderr; 'dev' also logs every probe with its session ID.\n"
        "'custom' loads a dictConfig JSON file given with --logging-config-file.",
    )

    parser.add_argument(
        "-lcf",
        "--logging-config-file",
        type=str,
        default=os.getenv("NET_PINGER_LOGGING_CONFIG_FILE", DEFAULT_LOGGING_CONFIG_FILE),
        help="Path to custom logging configuration file.\n"
        "Required when --logging-type is set to 'custom'.",
    )

    # Parse the command-line arguments
    args: Any = parser.parse_args(argv)

    # Defaults taken from the environment bypass the choices check.
    if args.logging_type not in LOGGING_TYPES:
        parser.error(f"argument -lt/--logging-type: invalid choice: '{args.logging_type}'")
    if args.logging_type == "custom" and not args.logging_config_file:
        parser.error("--logging-config-file is required when --logging-type is custom")

    return PingContext(
        address=args.address,
        port=args.port,
        counter=args.counter,
        interval=args.interval,
        timeout=args.timeout,
        http_mode=args.http,
        session_id=args.session_id,
        logging_type=args.logging_type,
        logging_config_file=args.logging_config_file,
    )
