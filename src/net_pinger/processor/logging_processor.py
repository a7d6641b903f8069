"""
Logging result processor.

Records every probe outcome through the standard logging system, so that a
custom logging configuration can ship probe history to a file or collector.
"""

import logging

from net_pinger.contracts import ResultProcessor
from net_pinger.domain import ProbeOutcome, Target

# Module logger
logger = logging.getLogger(__name__)


class LoggingProcessor(ResultProcessor):
    """Logs successful probes at INFO and failed ones at WARNING."""

    async def process(self, target: Target, outcome: ProbeOutcome) -> None:
        elapsed_ms = outcome.elapsed.total_seconds() * 1000
        if outcome.success:
            logger.info(
                f"Probe of {target.protocol}://{target} succeeded in {elapsed_ms:.3f}ms",
                extra={"diagnostic": outcome.diagnostic},
            )
        else:
            logger.warning(
                f"Probe of {target.protocol}://{target} failed after {elapsed_ms:.3f}ms: {outcome.error!r}"
            )
