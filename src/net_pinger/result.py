"""
Aggregation of probe outcomes into session statistics.

A Result is owned by exactly one ping session and is only ever mutated by
its fold method, one outcome at a time. Rendering is a pure function of the
current state, so a report can be produced at any point of a session.
"""

from datetime import timedelta

from .domain import ProbeOutcome, Target
from .durations import format_duration

_ZERO = timedelta(0)


class Result:
    """
    Running statistics of a single ping session.

    Attributes:
        counter: Number of probes folded so far.
        success_counter: Number of successful probes, never above counter.
        target: The Target being probed.
        diagnostic_tag: Diagnostic of the latest successful probe that had one.
        min_duration: Fastest successful probe.
        max_duration: Slowest successful probe.
        total_duration: Sum of the elapsed times of successful probes only.
    """

    def __init__(self, target: Target) -> None:
        self.counter: int = 0
        self.success_counter: int = 0
        self.target: Target = target
        self.diagnostic_tag: str = ""
        self.min_duration: timedelta = _ZERO
        self.max_duration: timedelta = _ZERO
        self.total_duration: timedelta = _ZERO

    def fold(self, outcome: ProbeOutcome) -> None:
        """
        Folds one probe outcome into the statistics.

        Failures, whatever their cause, only increase the probe counter.

        Args:
            outcome: The outcome reported by a prober.
        """
        self.counter += 1
        if not outcome.success:
            return

        self.success_counter += 1
        self.total_duration += outcome.elapsed
        if self.success_counter == 1:
            self.min_duration = outcome.elapsed
            self.max_duration = outcome.elapsed
        else:
            self.min_duration = min(self.min_duration, outcome.elapsed)
            self.max_duration = max(self.max_duration, outcome.elapsed)

        if outcome.diagnostic:
            self.diagnostic_tag = outcome.diagnostic

    def average(self) -> timedelta:
        """Returns the mean elapsed time of successful probes, zero if there are none."""
        if self.success_counter == 0:
            return _ZERO
        return self.total_duration / self.success_counter

    def failure_rate(self) -> str:
        """
        Returns the share of failed probes as a percentage with two decimals.

        The rate is only meaningful once at least one probe has been folded;
        before that it is reported as "NaN%".
        """
        if self.counter == 0:
            return "NaN%"
        failed = (self.counter - self.success_counter) * 100 / self.counter
        return f"{failed:.2f}%"

    def render(self) -> str:
        """Returns the human-readable report for the current state."""
        return render_result(self)

    def __str__(self) -> str:
        return self.render()


def render_result(result: Result) -> str:
    """
    Formats a Result as a ping statistics report.

    The report looks like::

        --- example.com:443 ping statistics ---
        4 responses, 3 ok, 25.00% failed
        round-trip min/avg/max = 10ms/30ms/50ms

    preceded by the diagnostic tag line when one is known.

    Args:
        result: The statistics to render; left untouched.

    Returns:
        str: The newline-separated report.
    """
    lines = [
        f"--- {result.target} ping statistics ---",
        f"{result.counter} responses, {result.success_counter} ok, {result.failure_rate()} failed",
        "round-trip min/avg/max = "
        f"{format_duration(result.min_duration)}/"
        f"{format_duration(result.average())}/"
        f"{format_duration(result.max_duration)}",
    ]
    if result.diagnostic_tag:
        lines.insert(0, result.diagnostic_tag.rstrip("\n"))
    return "\n".join(lines)
