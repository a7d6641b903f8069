"""
Delegating result processor implementation.

This module provides a composite implementation of the ResultProcessor interface
that delegates processing to multiple child processors concurrently. It ensures
that failures in one processor don't affect the others.
"""

import asyncio
import logging
from typing import List

from net_pinger.contracts import ResultProcessor
from net_pinger.domain import ProbeOutcome, Target

# Module logger
logger = logging.getLogger(__name__)


class DelegatingResultProcessor(ResultProcessor):
    """
    A concrete implementation of ResultProcessor that follows the Composite pattern.

    This class holds a list of other ResultProcessor instances and delegates the 'process'
    call to each of them concurrently, so the session only deals with a single processor.
    If one processor fails, the others are still executed.
    """

    def __init__(self, processors: List[ResultProcessor]) -> None:
        """
        Initializes the delegator with a list of processors to delegate to.

        Args:
            processors: A list of objects that adhere to the ResultProcessor interface.
        """
        self._processors: List[ResultProcessor] = processors

    async def _process_with_one(
        self, processor: ResultProcessor, target: Target, outcome: ProbeOutcome
    ) -> None:
        """
        Runs a single processor, logging instead of propagating its failure.

        Args:
            processor: The individual processor to run.
            target: The Target that was probed.
            outcome: The probe outcome to be processed.
        """
        try:
            await processor.process(target, outcome)
        except Exception as e:
            logger.exception(
                f"Processor '{type(processor).__name__}' failed for target {target} with error: {e}",
            )

    async def process(self, target: Target, outcome: ProbeOutcome) -> None:
        """
        Processes a probe outcome by delegating to all child processors.

        Args:
            target: The Target that was probed.
            outcome: The probe outcome to be processed by all child processors.

        Returns:
            None
        """
        if not self._processors:
            return

        tasks = [
            self._process_with_one(processor, target, outcome) for processor in self._processors
        ]
        await asyncio.gather(*tasks)
