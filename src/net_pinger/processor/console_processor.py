"""
Console result processor.

This module defines a processor that writes one human-readable line per
probe to a text stream, the way ping-like tools report progress while a
session is running.
"""

import sys
from typing import Optional, TextIO

from net_pinger.contracts import ResultProcessor
from net_pinger.domain import ProbeOutcome, Target
from net_pinger.durations import format_duration


def format_outcome(target: Target, outcome: ProbeOutcome) -> str:
    """
    Formats a probe outcome as a single line.

    Args:
        target: The Target that was probed.
        outcome: The outcome of the probe.

    Returns:
        str: e.g. "Ping tcp://example.com:80 - connected - time=12.3ms".
    """
    status = "connected" if outcome.success else "failed"
    line = f"Ping {target.protocol}://{target} - {status} - time={format_duration(outcome.elapsed)}"
    if outcome.diagnostic:
        line += f" {outcome.diagnostic}"
    if outcome.error is not None:
        line += f" error={type(outcome.error).__name__}"
    return line


class ConsoleProcessor(ResultProcessor):
    """Writes a line per probe to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream: Optional[TextIO] = stream

    async def process(self, target: Target, outcome: ProbeOutcome) -> None:
        # Resolved lazily so that a replaced sys.stdout is honoured.
        stream = self._stream or sys.stdout
        print(format_outcome(target, outcome), file=stream, flush=True)
