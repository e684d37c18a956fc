"""Unit tests for package manager detection."""

from unittest.mock import patch

import pytest
from tmuxctl.models.manager import DETECTION_ORDER, PackageManagerKind
from tmuxctl.operators.apt import AptOperator
from tmuxctl.operators.detect import (
    detect_operator,
    detect_package_manager,
    get_operator,
)
from tmuxctl.operators.pacman import PacmanOperator
from tmuxctl.operators.rpm import DnfOperator, YumOperator, ZypperOperator


def _only(*present: str):
    """command_exists stand-in that finds only the given executables."""
    return lambda name: name in present


class TestDetectPackageManager:
    """Tests for detect_package_manager."""

    def test_detection_order(self) -> None:
        """Managers are probed apt, dnf, yum, pacman, zypper."""
        assert [exe for _, exe in DETECTION_ORDER] == ["apt-get", "dnf", "yum", "pacman", "zypper"]

    @pytest.mark.parametrize(
        ("present", "expected"),
        [
            (("apt-get",), PackageManagerKind.APT),
            (("dnf",), PackageManagerKind.DNF),
            (("yum",), PackageManagerKind.YUM),
            (("pacman",), PackageManagerKind.PACMAN),
            (("zypper",), PackageManagerKind.ZYPPER),
        ],
    )
    def test_detects_single_manager(
        self, present: tuple[str, ...], expected: PackageManagerKind
    ) -> None:
        """The one present manager is detected."""
        with patch("tmuxctl.operators.detect.command_exists", side_effect=_only(*present)):
            assert detect_package_manager() == expected

    def test_priority_wins(self) -> None:
        """dnf beats yum when both are installed."""
        with patch("tmuxctl.operators.detect.command_exists", side_effect=_only("yum", "dnf")):
            assert detect_package_manager() == PackageManagerKind.DNF

    def test_unknown(self) -> None:
        """No known manager yields None."""
        with patch("tmuxctl.operators.detect.command_exists", return_value=False):
            assert detect_package_manager() is None
            assert detect_operator() is None


class TestGetOperator:
    """Tests for get_operator and detect_operator."""

    @pytest.mark.parametrize(
        ("kind", "operator_cls"),
        [
            (PackageManagerKind.APT, AptOperator),
            (PackageManagerKind.DNF, DnfOperator),
            (PackageManagerKind.YUM, YumOperator),
            (PackageManagerKind.PACMAN, PacmanOperator),
            (PackageManagerKind.ZYPPER, ZypperOperator),
        ],
    )
    def test_maps_kind_to_operator(self, kind: PackageManagerKind, operator_cls: type) -> None:
        """Every kind has an operator."""
        assert isinstance(get_operator(kind), operator_cls)

    def test_dry_run_is_passed_through(self) -> None:
        """detect_operator forwards dry_run."""
        with patch("tmuxctl.operators.detect.command_exists", side_effect=_only("pacman")):
            operator = detect_operator(dry_run=True)

        assert isinstance(operator, PacmanOperator)
        assert operator.dry_run is True
