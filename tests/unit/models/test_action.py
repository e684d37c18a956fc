"""Unit tests for action record models."""

import pytest
from tmuxctl.models.action import (
    SENTINELS,
    ActionKind,
    ActionRecord,
    ReversalResult,
    package_record,
)


class TestActionRecordValidation:
    """Tests for ActionRecord validation."""

    def test_package_record_requires_name(self) -> None:
        """PACKAGE_INSTALLED records need a package name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ActionRecord(kind=ActionKind.PACKAGE_INSTALLED)

    def test_package_name_cannot_contain_whitespace(self) -> None:
        """Package names must fit on one line as a single token."""
        with pytest.raises(ValueError, match="whitespace"):
            package_record("tmux\nrm")

    def test_package_name_cannot_look_like_sentinel(self) -> None:
        """Package names cannot start with the sentinel prefix."""
        with pytest.raises(ValueError, match="cannot start with"):
            package_record("__wrote_tmux_conf")

    def test_sentinel_record_rejects_package(self) -> None:
        """Non-package records cannot carry a package name."""
        with pytest.raises(ValueError, match="do not carry"):
            ActionRecord(kind=ActionKind.CONFIG_WRITTEN, package="tmux")


class TestActionRecordSerialization:
    """Tests for the state file line format."""

    @pytest.mark.parametrize(
        ("kind", "token"),
        [
            (ActionKind.CONFIG_WRITTEN, "__wrote_tmux_conf"),
            (ActionKind.TERMINFO_CREATED, "__created_terminfo_tmux_256color"),
            (ActionKind.PLUGIN_MANAGER_CLONED, "__cloned_tpm"),
            (ActionKind.PLUGINS_INSTALLED, "__installed_plugins"),
        ],
    )
    def test_sentinel_tokens(self, kind: ActionKind, token: str) -> None:
        """Sentinels use the same tokens as the shell installer's state file."""
        assert ActionRecord(kind=kind).to_line() == token
        assert ActionRecord.from_line(token) == ActionRecord(kind=kind)

    def test_every_non_package_kind_has_sentinel(self) -> None:
        """Each non-package kind maps to exactly one sentinel."""
        non_package = {k for k in ActionKind if k != ActionKind.PACKAGE_INSTALLED}
        assert set(SENTINELS) == non_package
        assert len(set(SENTINELS.values())) == len(SENTINELS)

    def test_package_line(self) -> None:
        """A package record is written as its bare name."""
        assert package_record("xclip").to_line() == "xclip"

    def test_from_line_parses_package(self) -> None:
        """Any plain token parses as a package record."""
        record = ActionRecord.from_line("tmux\n")

        assert record is not None
        assert record.kind == ActionKind.PACKAGE_INSTALLED
        assert record.package == "tmux"

    def test_from_line_blank(self) -> None:
        """Blank lines parse to None."""
        assert ActionRecord.from_line("   \n") is None

    def test_from_line_unknown_sentinel(self) -> None:
        """Unknown sentinels parse to None instead of raising."""
        assert ActionRecord.from_line("__something_new") is None

    def test_from_line_multiple_tokens(self) -> None:
        """A line with embedded whitespace is not a valid record."""
        assert ActionRecord.from_line("tmux git\n") is None

    def test_label(self) -> None:
        """label shows the package name or the sentinel token."""
        assert package_record("git").label == "git"
        assert ActionRecord(kind=ActionKind.PLUGIN_MANAGER_CLONED).label == "__cloned_tpm"


class TestReversalResult:
    """Tests for ReversalResult."""

    def test_failed_property(self) -> None:
        """failed is the inverse of success."""
        record = package_record("tmux")

        assert ReversalResult(record=record, success=True).failed is False
        assert ReversalResult(record=record, success=False, error="boom").failed is True
