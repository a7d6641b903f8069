"""
Configuration context for the reachability prober.

This module defines a data structure that holds all configuration parameters
of a prober run. It serves as a central point for passing configuration
throughout the application.
"""

from datetime import timedelta
from typing import NamedTuple, Optional


class PingContext(NamedTuple):
    """
    A data structure containing all configuration parameters of a prober run.

    This class is immutable and is created by parsing command-line arguments
    and environment variables.

    Attributes:
        address: The raw address to probe, e.g. "https://example.com/health".
        port: Port overriding the one in the address, if given.
        counter: Number of probes to issue; 0 means until interrupted.
        interval: Minimum spacing between the start of two probes.
        timeout: Maximum duration of a single probe.
        http_mode: Whether addresses without a scheme are probed over HTTP.
        session_id: Unique identifier of this run, injected into log records.
        logging_type: Type of logging configuration to use (dev, prod, or custom).
        logging_config_file: Path to custom logging configuration file (if logging_type is 'custom').
    """

    address: str
    port: Optional[int]
    counter: int
    interval: timedelta
    timeout: timedelta
    http_mode: bool
    session_id: str
    logging_type: str
    logging_config_file: str
