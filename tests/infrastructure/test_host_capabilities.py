"""Tests for the concrete host capabilities."""

from pathlib import Path

import pytest

from orderpad.domain.exceptions import ExportError
from orderpad.infrastructure.host import system_share_capability
from orderpad.infrastructure.host.file_print_capability import FileSystemPrintCapability
from orderpad.infrastructure.host.system_share_capability import (
    NullShareCapability,
    SystemShareCapability,
)


class TestFileSystemPrintCapability:

    def test_writes_artifact(self, tmp_path):
        capability = FileSystemPrintCapability(tmp_path / "out")
        location = capability.render_to_file(b"%PDF-1.4 data", "pedido.pdf")
        assert location == (tmp_path / "out" / "pedido.pdf").resolve()
        assert location.read_bytes() == b"%PDF-1.4 data"

    def test_overwrites_previous_export(self, tmp_path):
        capability = FileSystemPrintCapability(tmp_path)
        capability.render_to_file(b"old", "pedido.pdf")
        location = capability.render_to_file(b"new", "pedido.pdf")
        assert location.read_bytes() == b"new"

    def test_stays_inside_output_dir(self, tmp_path):
        capability = FileSystemPrintCapability(tmp_path / "out")
        location = capability.render_to_file(b"x", "../escape.pdf")
        assert location.parent == (tmp_path / "out").resolve()


class TestSystemShareCapability:

    def test_share_launches_file(self, monkeypatch):
        launched: list[str] = []
        monkeypatch.setattr(
            system_share_capability.click, "launch", lambda url: launched.append(url) or 0
        )
        SystemShareCapability().share(Path("/tmp/pedido.pdf"), "application/pdf", "Title")
        assert launched == [str(Path("/tmp/pedido.pdf"))]

    def test_failed_launch_raises(self, monkeypatch):
        monkeypatch.setattr(system_share_capability.click, "launch", lambda url: 3)
        with pytest.raises(ExportError, match="exit code 3"):
            SystemShareCapability().share(Path("/tmp/pedido.pdf"), "application/pdf", "Title")

    def test_available_when_opener_exists(self, monkeypatch):
        monkeypatch.setattr(system_share_capability.sys, "platform", "linux")
        monkeypatch.setattr(system_share_capability.shutil, "which", lambda name: "/usr/bin/xdg-open")
        assert SystemShareCapability().is_available()

    def test_unavailable_without_opener(self, monkeypatch):
        monkeypatch.setattr(system_share_capability.sys, "platform", "linux")
        monkeypatch.setattr(system_share_capability.shutil, "which", lambda name: None)
        assert not SystemShareCapability().is_available()


class TestNullShareCapability:

    def test_never_available(self):
        assert not NullShareCapability().is_available()

    def test_share_raises(self):
        with pytest.raises(ExportError, match="not available"):
            NullShareCapability().share(Path("x.pdf"), "application/pdf", "Title")
