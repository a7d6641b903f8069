"""
Core interfaces for the reachability prober.

This module defines the abstract base classes that sit between the ping
session and the components doing network I/O or presenting results. They
keep the session loop independent from any particular transport.
"""

import abc

from .domain import ProbeOutcome, Target


class Prober(abc.ABC):
    """
    Abstract interface for a component that performs one probe of a target.

    Its responsibility is to encapsulate the network I/O for a given Target
    and return a structured outcome.
    """

    @abc.abstractmethod
    async def probe(self, target: Target) -> ProbeOutcome:
        """
        Performs a single probe against the given target.

        Args:
            target: The resolved Target to reach.

        Returns:
            ProbeOutcome: Whether the probe succeeded, how long it took and
                an optional diagnostic annotation.

        Raises:
            Exception: Implementations should handle network errors internally and
                report them as unsuccessful outcomes rather than raising them.
        """
        pass


class ResultProcessor(abc.ABC):
    """
    Abstract interface for a component that receives every probe outcome.

    This enables a pipeline pattern where multiple processors can act on
    each probe, e.g. printing a line per probe or forwarding it elsewhere.
    """

    @abc.abstractmethod
    async def process(self, target: Target, outcome: ProbeOutcome) -> None:
        """
        Processes a single probe outcome.

        Args:
            target: The Target that was probed.
            outcome: The outcome of the probe.

        Returns:
            None
        """
        pass
