"""
Constants for the reachability prober.

This module defines default values for all configurable parameters
of the prober. These constants are used as fallback values
when neither command-line arguments nor environment variables are provided.
"""

# Probing defaults
DEFAULT_COUNTER = 4
DEFAULT_INTERVAL = "1s"
DEFAULT_TIMEOUT = "1s"
DEFAULT_HTTP_MODE = "false"

# Session configuration defaults
DEFAULT_SESSION_ID_PREFIX = "net-pinger-"

# Logging configuration defaults
DEFAULT_LOGGING_TYPE = "prod"
DEFAULT_LOGGING_CONFIG_FILE = ""
