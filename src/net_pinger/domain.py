"""
Domain models for the reachability prober.

This module defines the core data structures used throughout the application,
including the probing protocols, resolved targets and single probe outcomes.
These models serve as the foundation for the prober's data flow.
"""

from datetime import timedelta
from enum import Enum
from typing import NamedTuple, Optional

from .errors import UnsupportedProtocol


class Protocol(str, Enum):
    """
    Defines supported probing protocols as a type-safe enumeration.

    Inheriting from 'str' allows enum members to behave like strings,
    making them compatible with libraries expecting string values.
    """

    TCP = "tcp"
    HTTP = "http"
    HTTPS = "https"

    def __str__(self) -> str:
        return self.value

    @property
    def default_port(self) -> int:
        """
        The port used when the address does not carry one.

        TCP shares the HTTP default of 80.
        """
        if self is Protocol.HTTPS:
            return 443
        return 80

    @classmethod
    def parse(cls, text: str) -> "Protocol":
        """
        Converts a protocol name to a Protocol, ignoring case.

        Args:
            text: The protocol name, e.g. "tcp" or "HTTPS".

        Returns:
            Protocol: The matching enumeration member.

        Raises:
            UnsupportedProtocol: If the name is not one of tcp, http or https.
        """
        try:
            return cls(text.lower())
        except ValueError:
            raise UnsupportedProtocol(text) from None


class Target(NamedTuple):
    """
    Represents a single resolved endpoint to probe with its session settings.

    A Target is created once by the resolver and is read-only afterwards.

    Attributes:
        protocol: The protocol used to probe the endpoint.
        host: The hostname or IPv4 address, passed through without DNS lookup.
        port: The resolved port, always in the 1-65535 range.
        remote: The original address string, kept for display.
        counter: How many probes to issue; 0 means until stopped.
        interval: Minimum spacing between the start of two probes.
        timeout: Maximum time a single probe may take.
        path: Path and query of the address, requested by HTTP probes.
    """

    protocol: Protocol
    host: str
    port: int
    remote: str
    counter: int
    interval: timedelta
    timeout: timedelta
    path: str = "/"

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def url(self) -> str:
        """The URL requested by HTTP and HTTPS probes."""
        return f"{self.protocol}://{self.host}:{self.port}{self.path}"


class ProbeOutcome(NamedTuple):
    """
    The outcome of a single probe attempt.

    Timeouts, refused connections and non-2xx HTTP statuses are all
    represented as unsuccessful outcomes rather than raised exceptions.

    Attributes:
        success: Whether the endpoint answered as expected.
        elapsed: Time spent on the attempt.
        diagnostic: Optional annotation from the probe (TTL, HTTP status line).
        error: The exception that caused a failure, if any.
    """

    success: bool
    elapsed: timedelta
    diagnostic: Optional[str] = None
    error: Optional[Exception] = None
