"""
Exceptions raised while turning a user-supplied address into a Target.

Both errors derive from ValueError so that callers treating any bad input
as a value error keep working, while still being able to distinguish an
address that cannot be parsed from one using a protocol we cannot probe.
"""


class ResolveError(ValueError):
    """Base class for all target resolution errors."""


class MalformedAddress(ResolveError):
    """
    Raised when an address matches neither a hostname nor an IPv4 shape.

    This also covers trailing input that cannot be consumed and ports
    outside the valid 1-65535 range.
    """

    def __init__(self, address: str, reason: str = "not a valid host or IPv4 address") -> None:
        super().__init__(f"Malformed address '{address}': {reason}")
        self.address: str = address
        self.reason: str = reason


class UnsupportedProtocol(ResolveError):
    """Raised when a scheme is recognised but cannot be probed."""

    def __init__(self, protocol: str) -> None:
        super().__init__(f"Protocol '{protocol}' is not supported (expected one of: tcp, http, https)")
        self.protocol: str = protocol
