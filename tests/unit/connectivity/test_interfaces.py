"""Test interface status sources."""

from pathlib import Path

import pytest

from coachgen.connectivity.interfaces import SysfsInterfaceSource, StaticInterfaceSource
from coachgen.models.connectivity import InterfaceClass, PathStatus


def add_interface(root: Path, name: str, operstate: str) -> None:
    (root / name).mkdir()
    (root / name / "operstate").write_text(f"{operstate}\n")


class TestSysfsInterfaceSource:
    """Test SysfsInterfaceSource class."""

    @pytest.fixture
    def root(self, tmp_path: Path) -> Path:
        add_interface(tmp_path, "lo", "unknown")
        return tmp_path

    def test_no_interfaces(self, root):
        """Test loopback alone means nothing is available."""
        source = SysfsInterfaceSource(root)

        for interface_class in InterfaceClass:
            assert source.status(interface_class) == PathStatus.UNSATISFIED

    def test_wifi_up(self, root):
        """Test an up wireless interface satisfies primary and any."""
        add_interface(root, "wlan0", "up")
        source = SysfsInterfaceSource(root)

        assert source.status(InterfaceClass.PRIMARY) == PathStatus.SATISFIED
        assert source.status(InterfaceClass.SECONDARY) == PathStatus.UNSATISFIED
        assert source.status(InterfaceClass.ANY) == PathStatus.SATISFIED

    def test_cellular_up(self, root):
        """Test cellular interfaces count as secondary."""
        add_interface(root, "wwan0", "up")
        add_interface(root, "eth0", "down")
        source = SysfsInterfaceSource(root)

        assert source.status(InterfaceClass.PRIMARY) == PathStatus.REQUIRES_CONNECTION
        assert source.status(InterfaceClass.SECONDARY) == PathStatus.SATISFIED
        assert source.status(InterfaceClass.ANY) == PathStatus.SATISFIED

    def test_present_but_down(self, root):
        """Test interfaces that exist but are down need a connection."""
        add_interface(root, "eth0", "down")
        source = SysfsInterfaceSource(root)

        assert source.status(InterfaceClass.PRIMARY) == PathStatus.REQUIRES_CONNECTION
        assert source.status(InterfaceClass.ANY) == PathStatus.REQUIRES_CONNECTION

    def test_missing_operstate(self, root):
        """Test unreadable operstate counts as not up."""
        (root / "eth1").mkdir()
        source = SysfsInterfaceSource(root)

        assert source.status(InterfaceClass.PRIMARY) == PathStatus.REQUIRES_CONNECTION

    def test_missing_root(self, tmp_path):
        """Test absent sysfs reports nothing available."""
        source = SysfsInterfaceSource(tmp_path / "absent")

        assert source.status(InterfaceClass.ANY) == PathStatus.UNSATISFIED


class TestStaticInterfaceSource:
    """Test StaticInterfaceSource class."""

    def test_defaults_to_unsatisfied(self):
        assert StaticInterfaceSource().status(InterfaceClass.PRIMARY) == PathStatus.UNSATISFIED

    def test_set(self):
        source = StaticInterfaceSource()
        source.set(InterfaceClass.SECONDARY, PathStatus.SATISFIED)

        assert source.status(InterfaceClass.SECONDARY) == PathStatus.SATISFIED
