"""
Target resolution for the reachability prober.

This module turns an ambiguous user-supplied address such as
``https://example.com:8443/health``, ``10.0.0.5`` or ``tcp://db.internal:5432``
into a validated Target. Parsing is done by a few small sub-parsers (scheme,
host, port and path), each consuming part of the input from a given position,
so that default ports and error kinds can be reasoned about independently.

No DNS resolution is performed: hostnames are passed through verbatim.
"""

import logging
import re
from datetime import timedelta
from typing import Iterator, NamedTuple, Optional, Tuple

from .domain import Protocol, Target
from .errors import MalformedAddress

# Module logger
logger = logging.getLogger(__name__)

# Schemes recognised by the address shape; only tcp, http and https can be probed.
_SCHEME_RE = re.compile(r"(https?|ftps?|tcp)://", re.IGNORECASE)
_DNS_NAME_RE = re.compile(r"(?:[a-zA-Z0-9_\-]+\.)+[a-zA-Z]{2,}")

# Dotted quads: the first octet cannot be 0, zero-padded octets such as 001 are valid.
_FIRST_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01][0-9]{2}|[1-9][0-9]|[1-9])"
_MIDDLE_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01][0-9]{2}|[1-9][0-9]|[1-9]|0)"
_LAST_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01][0-9]{2}|[1-9][0-9]|[0-9])"
_IPV4_RE = re.compile(rf"{_FIRST_OCTET}\.{_MIDDLE_OCTET}\.{_MIDDLE_OCTET}\.{_LAST_OCTET}")

# Lenient dotted form with a trailing dot, e.g. "12.34.56.78."
_DOTTED_RE = re.compile(r"(?:(?:25[0-5]|2[0-4][0-9]|[01][0-9]{2}|[0-9]?[0-9])\.?[0-9]\.){4}")

_HOST_PATTERNS = (_DNS_NAME_RE, _DOTTED_RE, _IPV4_RE)

_PORT_RE = re.compile(r":([0-9]+)")
_PATH_RE = re.compile(r"/[a-zA-Z0-9\-._?,'/\\+&;%$#=~]*")

MAX_PORT = 65535

# A parser returns the parsed value and the position after it, or None.
_Parsed = Optional[Tuple[str, int]]


class ResolvedAddress(NamedTuple):
    """
    The raw outcome of parsing an address string.

    Attributes:
        schema: One of "tcp", "http" or "https"; empty when not matched.
        host: The hostname or IPv4 address.
        port: The explicit or protocol-default port; 0 when not matched.
        matched: Whether the input had a recognisable address shape.
    """

    schema: str
    host: str
    port: int
    matched: bool


UNMATCHED = ResolvedAddress(schema="", host="", port=0, matched=False)


def parse_scheme(text: str, pos: int = 0) -> _Parsed:
    """Parses an optional ``scheme://`` prefix and returns the lowercased scheme."""
    match = _SCHEME_RE.match(text, pos)
    if not match:
        return None
    return match.group(1).lower(), match.end()


def _host_candidates(text: str, pos: int) -> Iterator[Tuple[str, int]]:
    for pattern in _HOST_PATTERNS:
        match = pattern.match(text, pos)
        if match:
            yield match.group(0), match.end()


def parse_host(text: str, pos: int = 0) -> _Parsed:
    """
    Parses a dotted DNS name or, failing that, an IPv4 address.

    A DNS name needs at least two labels and a top-level label of two or more
    letters, so a bare IPv4 address never matches it.
    """
    return next(_host_candidates(text, pos), None)


def parse_port(text: str, pos: int = 0) -> _Parsed:
    """Parses an optional ``:port`` suffix and returns the digits."""
    match = _PORT_RE.match(text, pos)
    if not match:
        return None
    return match.group(1), match.end()


def parse_path(text: str, pos: int = 0) -> _Parsed:
    """Parses an optional path and query suffix."""
    match = _PATH_RE.match(text, pos)
    if not match:
        return None
    return match.group(0), match.end()


def _parse_tail(text: str, pos: int) -> Optional[Tuple[str, str]]:
    """Parses the optional port and path, which must run to the end of the text."""
    port_text = ""
    port = parse_port(text, pos)
    if port:
        port_text, pos = port

    path_text = ""
    path = parse_path(text, pos)
    if path:
        path_text, pos = path

    if pos != len(text):
        return None
    return port_text, path_text


def _parse_address(
    uri: str, default_protocol: Protocol
) -> Tuple[ResolvedAddress, str]:
    """
    Parses an address into its resolved parts and its path.

    Each host shape is tried in turn; the first one after which the port and
    path consume the rest of the input wins.
    """
    pos = 0
    schema = default_protocol.value

    scheme = parse_scheme(uri, pos)
    if scheme:
        schema, pos = scheme

    for host_name, host_end in _host_candidates(uri, pos):
        tail = _parse_tail(uri, host_end)
        if tail is None:
            continue
        port_text, path_text = tail

        # Validate the scheme only once the address shape is known to be good.
        protocol = Protocol.parse(schema)
        address = ResolvedAddress(
            schema=protocol.value,
            host=host_name,
            port=int(port_text) if port_text else protocol.default_port,
            matched=True,
        )
        return address, path_text or "/"

    return UNMATCHED, ""


def check_uri(uri: str, default_protocol: Protocol = Protocol.TCP) -> ResolvedAddress:
    """
    Parses an address string into its scheme, host and port.

    Missing schemes default to default_protocol and missing ports to the
    protocol's default port.
    An optional path is accepted and dropped. The whole input must be consumed.

    Args:
        uri: The raw address, e.g. "https://example.com:8443/health".
        default_protocol: Protocol assumed when the address has no scheme.

    Returns:
        ResolvedAddress: The parsed parts, or UNMATCHED when the input has no
            recognisable address shape.

    Raises:
        UnsupportedProtocol: If the scheme has a valid shape but cannot be probed,
            e.g. "ftp://host.com".
    """
    address, _ = _parse_address(uri, default_protocol)
    return address


def resolve(
    raw: str,
    counter: int,
    interval: timedelta,
    timeout: timedelta,
    port: Optional[int] = None,
    default_protocol: Protocol = Protocol.TCP,
) -> Target:
    """
    Resolves a raw address string into a Target ready to be probed.

    Args:
        raw: The address supplied by the user, kept verbatim as Target.remote.
        counter: Number of probes to issue; 0 means until stopped.
        interval: Minimum spacing between probes, must be positive.
        timeout: Per-probe timeout, must be positive.
        port: Optional port overriding the parsed or default one.
        default_protocol: Protocol assumed when the address has no scheme.

    Returns:
        Target: The immutable, fully resolved target.

    Raises:
        MalformedAddress: If the address cannot be parsed or the port is out of range.
        UnsupportedProtocol: If the address uses a scheme that cannot be probed.
        ValueError: If counter, interval or timeout are out of range.
    """
    if counter < 0:
        raise ValueError("counter must be zero (unbounded) or a positive integer.")
    if interval <= timedelta(0):
        raise ValueError("interval must be a positive duration.")
    if timeout <= timedelta(0):
        raise ValueError("timeout must be a positive duration.")

    address, path = _parse_address(raw, default_protocol)
    if not address.matched:
        raise MalformedAddress(raw)

    resolved_port = address.port if port is None else port
    if not 1 <= resolved_port <= MAX_PORT:
        raise MalformedAddress(raw, f"port {resolved_port} is outside 1-{MAX_PORT}")

    target = Target(
        protocol=Protocol(address.schema),
        host=address.host,
        port=resolved_port,
        remote=raw,
        counter=counter,
        interval=interval,
        timeout=timeout,
        path=path,
    )
    logger.debug(f"Resolved '{raw}' to {target.protocol}://{target}")
    return target
