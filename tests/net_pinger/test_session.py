"""
Unit tests for the PingSession class.

This module contains tests for the probing loop: counters, stop signalling,
interval spacing and resilience against processor failures.

The tests follow the Arrange-Act-Assert (AAA) pattern and use mocks for the
prober and processor collaborators.
"""

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from net_pinger.contracts import Prober, ResultProcessor
from net_pinger.domain import ProbeOutcome, Protocol, Target
from net_pinger.session import PingSession


def _target(counter: int, interval: timedelta = timedelta(milliseconds=1)) -> Target:
    return Target(
        protocol=Protocol.TCP,
        host="example.com",
        port=80,
        remote="example.com",
        counter=counter,
        interval=interval,
        timeout=timedelta(seconds=1),
    )


@pytest_asyncio.fixture
async def mock_prober() -> AsyncMock:
    """
    Creates a mock Prober returning alternating outcomes.

    Returns:
        AsyncMock: A mock Prober.
    """
    prober = AsyncMock(spec=Prober)
    prober.probe.side_effect = [
        ProbeOutcome(success=True, elapsed=timedelta(milliseconds=10), diagnostic="local_ttl=64"),
        ProbeOutcome(success=False, elapsed=timedelta(seconds=1), error=TimeoutError()),
        ProbeOutcome(success=True, elapsed=timedelta(milliseconds=30)),
    ]
    return prober


@pytest_asyncio.fixture
async def mock_processor() -> AsyncMock:
    """
    Creates a mock ResultProcessor for testing.

    Returns:
        AsyncMock: A mock ResultProcessor.
    """
    return AsyncMock(spec=ResultProcessor)


@pytest.mark.asyncio
async def test_start_should_issue_counter_probes(
    mock_prober: AsyncMock, mock_processor: AsyncMock
) -> None:
    """
    Tests that the session stops after target.counter probes and folds each one.
    """
    # Arrange
    target = _target(counter=3)
    session = PingSession(target, mock_prober, mock_processor)

    # Act
    result = await session.start()

    # Assert
    assert result is session.result
    assert mock_prober.probe.await_count == 3
    assert mock_processor.process.await_count == 3
    assert result.counter == 3
    assert result.success_counter == 2
    assert result.min_duration == timedelta(milliseconds=10)
    assert result.max_duration == timedelta(milliseconds=30)
    assert result.diagnostic_tag == "local_ttl=64"
    mock_prober.probe.assert_awaited_with(target)


@pytest.mark.asyncio
async def test_processor_should_receive_each_outcome_in_order(
    mock_prober: AsyncMock, mock_processor: AsyncMock
) -> None:
    """
    Tests that the processor sees the same outcomes that were folded.
    """
    # Arrange
    target = _target(counter=2)
    session = PingSession(target, mock_prober, mock_processor)

    # Act
    await session.start()

    # Assert
    outcomes = [call.args[1] for call in mock_processor.process.await_args_list]
    assert [outcome.success for outcome in outcomes] == [True, False]
    assert all(call.args[0] == target for call in mock_processor.process.await_args_list)


@pytest.mark.asyncio
async def test_processor_failure_should_not_stop_session(
    mock_prober: AsyncMock, mock_processor: AsyncMock
) -> None:
    """
    Tests that an exception raised by the processor is logged and ignored.
    """
    # Arrange
    mock_processor.process.side_effect = RuntimeError("boom")
    session = PingSession(_target(counter=3), mock_prober, mock_processor)

    # Act
    result = await session.start()

    # Assert
    assert result.counter == 3


@pytest.mark.asyncio
async def test_stop_should_end_unbounded_session(mock_processor: AsyncMock) -> None:
    """
    Tests that a session with counter 0 runs until stop() is called.
    """
    # Arrange
    prober = AsyncMock(spec=Prober)
    session = PingSession(_target(counter=0, interval=timedelta(seconds=30)), prober, mock_processor)

    async def probe(target: Target) -> ProbeOutcome:
        if prober.probe.await_count >= 2:
            session.stop()
        return ProbeOutcome(success=True, elapsed=timedelta(milliseconds=1))

    prober.probe.side_effect = probe

    # Act
    result = await asyncio.wait_for(session.start(), timeout=5)

    # Assert
    assert result.counter == 2
    assert session.stopped is True


@pytest.mark.asyncio
async def test_stop_should_interrupt_interval_wait(mock_processor: AsyncMock) -> None:
    """
    Tests that stop() wakes up a session waiting for its next probe.
    """
    # Arrange
    prober = AsyncMock(spec=Prober)
    prober.probe.return_value = ProbeOutcome(success=True, elapsed=timedelta(milliseconds=1))
    session = PingSession(_target(counter=0, interval=timedelta(hours=1)), prober, mock_processor)

    # Act
    task = asyncio.create_task(session.start())
    await asyncio.sleep(0.05)
    session.stop()
    result = await asyncio.wait_for(task, timeout=5)

    # Assert
    assert result.counter == 1


@pytest.mark.asyncio
async def test_stop_before_start_should_issue_no_probe(
    mock_prober: AsyncMock, mock_processor: AsyncMock
) -> None:
    """
    Tests that a session stopped before starting never probes.
    """
    # Arrange
    session = PingSession(_target(counter=3), mock_prober, mock_processor)
    session.stop()
    session.stop()

    # Act
    result = await session.start()

    # Assert
    assert result.counter == 0
    mock_prober.probe.assert_not_awaited()


@pytest.mark.asyncio
async def test_start_should_space_probes_by_interval(mock_processor: AsyncMock) -> None:
    """
    Tests that consecutive probes start at least one interval apart.
    """
    # Arrange
    loop = asyncio.get_running_loop()
    started_at = []
    prober = AsyncMock(spec=Prober)

    async def probe(target: Target) -> ProbeOutcome:
        started_at.append(loop.time())
        return ProbeOutcome(success=True, elapsed=timedelta(milliseconds=1))

    prober.probe.side_effect = probe
    session = PingSession(
        _target(counter=3, interval=timedelta(milliseconds=50)), prober, mock_processor
    )

    # Act
    await session.start()

    # Assert
    gaps = [later - earlier for earlier, later in zip(started_at, started_at[1:])]
    assert len(gaps) == 2
    assert all(gap >= 0.045 for gap in gaps)
