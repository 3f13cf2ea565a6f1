"""Test interface watcher."""

import asyncio
from unittest.mock import Mock

import pytest

from coachgen.connectivity.interfaces import StaticInterfaceSource
from coachgen.connectivity.watcher import InterfaceWatcher
from coachgen.models.connectivity import InterfaceClass, PathStatus


class TestInterfaceWatcher:
    """Test InterfaceWatcher class."""

    @pytest.fixture
    def source(self) -> StaticInterfaceSource:
        return StaticInterfaceSource()

    def test_first_poll_reports(self, source):
        """Test the initial reading is reported."""
        on_change = Mock()
        watcher = InterfaceWatcher(InterfaceClass.PRIMARY, source, on_change)

        assert watcher.status is None
        assert watcher.poll_once() == PathStatus.UNSATISFIED
        on_change.assert_called_once_with(InterfaceClass.PRIMARY, PathStatus.UNSATISFIED)

    def test_reports_only_changes(self, source):
        """Test unchanged readings are not reported again."""
        on_change = Mock()
        watcher = InterfaceWatcher(InterfaceClass.PRIMARY, source, on_change)

        watcher.poll_once()
        watcher.poll_once()
        source.set(InterfaceClass.PRIMARY, PathStatus.SATISFIED)
        watcher.poll_once()

        assert on_change.call_count == 2
        assert watcher.status == PathStatus.SATISFIED

    @pytest.mark.asyncio
    async def test_background_polling(self, source):
        """Test the task picks up transitions and stops cleanly."""
        seen = []
        watcher = InterfaceWatcher(
            InterfaceClass.SECONDARY,
            source,
            lambda cls, status: seen.append(status),
            interval=0.01,
        )

        watcher.start()
        assert watcher.running
        await asyncio.sleep(0.03)
        source.set(InterfaceClass.SECONDARY, PathStatus.SATISFIED)
        await asyncio.sleep(0.05)
        await watcher.stop()

        assert not watcher.running
        assert seen == [PathStatus.UNSATISFIED, PathStatus.SATISFIED]

    @pytest.mark.asyncio
    async def test_poll_errors_do_not_stop_task(self):
        """Test a failing source is logged and polled again."""
        source = Mock()
        source.status.side_effect = iter(
            [OSError("boom")] + [PathStatus.SATISFIED] * 100
        )
        on_change = Mock()
        watcher = InterfaceWatcher(InterfaceClass.ANY, source, on_change, interval=0.01)

        watcher.start()
        await asyncio.sleep(0.05)
        await watcher.stop()

        on_change.assert_called_once_with(InterfaceClass.ANY, PathStatus.SATISFIED)

    @pytest.mark.asyncio
    async def test_stop_without_start(self, source):
        """Test stop is safe when never started."""
        watcher = InterfaceWatcher(InterfaceClass.ANY, source, Mock())
        await watcher.stop()
        assert not watcher.running
