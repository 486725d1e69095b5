"""File-system implementation of PrintCapability."""

from __future__ import annotations

from pathlib import Path

from orderpad.domain.port.host_capabilities import PrintCapability


class FileSystemPrintCapability(PrintCapability):

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def render_to_file(self, artifact: bytes, file_name: str) -> Path:
        """Write *artifact* into the output directory, replacing any older copy."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        location = self._output_dir / Path(file_name).name
        location.write_bytes(artifact)
        return location.resolve()
