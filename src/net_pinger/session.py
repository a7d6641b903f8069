"""
Ping session implementation for the reachability prober.

This module provides the PingSession class, which drives the probing loop
against a single target: it issues probes one at a time at a fixed interval,
folds every outcome into the session's Result and hands it to a processor.
"""

import asyncio
import logging

from .contracts import Prober, ResultProcessor
from .domain import ProbeOutcome, Target
from .result import Result


class PingSession:
    """
    Coordinates the probing of one target until its counter is reached or it is stopped.

    A session owns its Result and is its only writer. Independent targets
    need independent sessions.
    """

    def __init__(self, target: Target, prober: Prober, processor: ResultProcessor) -> None:
        """
        Initializes a new PingSession instance.

        Args:
            target: The resolved Target to probe.
            prober: Component that performs a single probe.
            processor: Component that receives every probe outcome.
        """
        self._target: Target = target
        self._prober: Prober = prober
        self._processor: ResultProcessor = processor
        self._result: Result = Result(target)
        self._logger: logging.Logger = logging.getLogger(__name__)
        self._stopped: asyncio.Event = asyncio.Event()

    @property
    def target(self) -> Target:
        return self._target

    @property
    def result(self) -> Result:
        return self._result

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    async def _probe_once(self) -> ProbeOutcome:
        """
        Runs one probe and records its outcome.

        Returns:
            ProbeOutcome: The outcome that was folded into the result.
        """
        outcome = await self._prober.probe(self._target)
        self._result.fold(outcome)

        try:
            await self._processor.process(self._target, outcome)
        except Exception as e:
            self._logger.exception(f"Processing failed for target {self._target} with error: {e}")

        return outcome

    async def _wait_interval(self, deadline: float) -> None:
        """
        Sleeps until the deadline, returning early if the session is stopped.

        Args:
            deadline: Event loop time at which the next probe may start.
        """
        delay = deadline - asyncio.get_running_loop().time()
        if delay <= 0:
            return
        try:
            await asyncio.wait_for(self._stopped.wait(), timeout=delay)
        except asyncio.TimeoutError:
            pass

    async def start(self) -> Result:
        """
        Runs the probing loop.

        Probes are issued sequentially, each starting at least one interval
        after the previous one started. The loop ends after target.counter
        probes, or never when the counter is 0, unless stop() is called.

        Returns:
            Result: The session's statistics once the loop has ended.
        """
        loop = asyncio.get_running_loop()
        interval: float = self._target.interval.total_seconds()
        counter: int = self._target.counter
        self._logger.info(
            f"Starting session for {self._target.protocol}://{self._target} "
            f"(counter: {counter or 'unbounded'}, interval: {interval}s)"
        )

        while not self._stopped.is_set():
            started_at = loop.time()
            await self._probe_once()

            if counter and self._result.counter >= counter:
                break
            await self._wait_interval(started_at + interval)

        self._logger.info(
            f"Session for {self._target} finished after {self._result.counter} probes"
        )
        return self._result

    def stop(self) -> None:
        """
        Signals the loop to stop issuing probes.

        A probe already in flight is allowed to finish and is still recorded.
        Calling stop more than once has no further effect.
        """
        if not self._stopped.is_set():
            self._logger.info(f"Stopping session for {self._target}...")
            self._stopped.set()
