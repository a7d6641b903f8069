"""
Logging configuration for the reachability prober.

Probe lines and the final report are written to stdout by the console
processor; logging only carries diagnostics on stderr. The built-in 'prod'
configuration therefore reports problems only, while 'dev' also traces every
probe. Every configuration, custom ones included, gets a filter attached to
all of its handlers that stamps records with the run's session ID.
"""

import copy
import json
import logging.config
import os
from typing import Any, Dict

from net_pinger.config.ping_context import PingContext

# Module logger
logger = logging.getLogger(__name__)

_BUILTIN_CONFIGS: Dict[str, str] = {
    "dev": "logging-config-dev.json",
    "prod": "logging-config-prod.json",
}

SESSION_FILTER_NAME = "session_id"


def configure_logging(context: PingContext) -> None:
    """
    Apply the logging configuration selected by the context.

    Args:
        context: Configuration context naming the logging type, the custom
            configuration file if any, and the session ID.

    Raises:
        ValueError: If the logging type is unknown, or 'custom' is requested
            without a configuration file.
        RuntimeError: If the configuration file cannot be read or applied.
    """
    logging_type: str = context.logging_type.lower()
    if logging_type == "custom":
        if not context.logging_config_file:
            raise ValueError("A logging configuration file is required for the 'custom' type.")
        config_file = context.logging_config_file
    elif logging_type in _BUILTIN_CONFIGS:
        config_file = builtin_config_path(logging_type)
    else:
        raise ValueError(
            f"Unknown logging type '{context.logging_type}' (expected one of: dev, prod, custom)"
        )

    config = with_session_filter(_read_config(config_file), context.session_id)
    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as err:
        raise RuntimeError(f"Logging configuration {config_file} was rejected: {err}") from err

    logger.debug(f"Logging configured from {config_file}")


def builtin_config_path(logging_type: str) -> str:
    """Returns the path of the packaged configuration for 'dev' or 'prod'."""
    return os.path.join(os.path.dirname(__file__), _BUILTIN_CONFIGS[logging_type])


def with_session_filter(config: Dict[str, Any], session_id: str) -> Dict[str, Any]:
    """
    Returns a copy of a dictConfig mapping with the session ID filter on every handler.

    Handler filters see records propagated from child loggers, which logger
    filters on the root logger would miss.

    Args:
        config: The dictConfig mapping as loaded from JSON.
        session_id: The identifier of the current run.

    Returns:
        Dict[str, Any]: The extended configuration; the input is left unchanged.
    """
    config = copy.deepcopy(config)
    config.setdefault("filters", {})[SESSION_FILTER_NAME] = {
        "()": _SessionIdFilter,
        "session_id": session_id,
    }
    for handler in config.get("handlers", {}).values():
        filters = handler.setdefault("filters", [])
        if SESSION_FILTER_NAME not in filters:
            filters.append(SESSION_FILTER_NAME)
    return config


def _read_config(config_file: str) -> Dict[str, Any]:
    """
    Reads a dictConfig mapping from a JSON file.

    Raises:
        RuntimeError: If the file is missing or is not a JSON object.
    """
    try:
        with open(config_file) as f:
            config = json.load(f)
    except FileNotFoundError as err:
        raise RuntimeError(f"Logging configuration not found: {config_file}") from err
    except json.JSONDecodeError as err:
        raise RuntimeError(f"Logging configuration is not valid JSON: {config_file}") from err

    if not isinstance(config, dict):
        raise RuntimeError(f"Logging configuration must be a JSON object: {config_file}")
    return config


class _SessionIdFilter(logging.Filter):
    """Stamps every record with the 'session_id' of the run that emitted it."""

    def __init__(self, session_id: str) -> None:
        super().__init__()
        self._session_id: str = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = self._session_id
        return True
