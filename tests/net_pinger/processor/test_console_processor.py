"""
Unit tests for the ConsoleProcessor class.

The tests follow the Arrange-Act-Assert (AAA) pattern.
"""

import io
from datetime import timedelta

import pytest

from net_pinger.domain import ProbeOutcome, Protocol, Target
from net_pinger.processor.console_processor import ConsoleProcessor, format_outcome


@pytest.fixture
def sample_target() -> Target:
    """
    Creates a sample Target object for testing.

    Returns:
        Target: A Target object with test values.
    """
    return Target(
        protocol=Protocol.TCP,
        host="example.com",
        port=80,
        remote="example.com",
        counter=4,
        interval=timedelta(seconds=1),
        timeout=timedelta(seconds=1),
    )


def test_format_outcome_should_describe_success(sample_target: Target) -> None:
    """
    Tests the line printed for a successful probe.
    """
    outcome = ProbeOutcome(
        success=True, elapsed=timedelta(milliseconds=12.3), diagnostic="93.184.216.34:80 local_ttl=64"
    )

    assert format_outcome(sample_target, outcome) == (
        "Ping tcp://example.com:80 - connected - time=12.3ms 93.184.216.34:80 local_ttl=64"
    )


def test_format_outcome_should_name_error(sample_target: Target) -> None:
    """
    Tests the line printed for a failed probe.
    """
    outcome = ProbeOutcome(success=False, elapsed=timedelta(seconds=1), error=TimeoutError())

    assert format_outcome(sample_target, outcome) == (
        "Ping tcp://example.com:80 - failed - time=1s error=TimeoutError"
    )


@pytest.mark.asyncio
async def test_process_should_write_line_to_stream(sample_target: Target) -> None:
    """
    Tests that each processed outcome is written as one line.
    """
    # Arrange
    stream = io.StringIO()
    processor = ConsoleProcessor(stream=stream)
    outcome = ProbeOutcome(success=True, elapsed=timedelta(milliseconds=5))

    # Act
    await processor.process(sample_target, outcome)
    await processor.process(sample_target, outcome)

    # Assert
    assert stream.getvalue() == (
        "Ping tcp://example.com:80 - connected - time=5ms\n" * 2
    )


@pytest.mark.asyncio
async def test_process_should_default_to_stdout(
    sample_target: Target, capsys: pytest.CaptureFixture
) -> None:
    """
    Tests that stdout is used when no stream is given.
    """
    # Act
    await ConsoleProcessor().process(
        sample_target, ProbeOutcome(success=True, elapsed=timedelta(milliseconds=5))
    )

    # Assert
    assert capsys.readouterr().out == "Ping tcp://example.com:80 - connected - time=5ms\n"
