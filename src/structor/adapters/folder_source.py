from __future__ import annotations

from pathlib import Path

from structor.domain.errors import MissingInput
from structor.domain.models import InputFile
from structor.domain.vector_formats import is_vector_name


class FolderSourceAdapter:
    def list_vector_files(self, folder: str | Path, recursive: bool = False) -> list[InputFile]:
        """Read SVG/EPS/AI files from a folder in stable name order."""
        root = Path(folder)
        if not root.is_dir():
            raise MissingInput(f"Input folder not found: {root}")
        pattern = "**/*" if recursive else "*"
        paths = sorted(
            (path for path in root.glob(pattern) if path.is_file() and is_vector_name(path.name)),
            key=lambda path: str(path.relative_to(root)).lower(),
        )
        if not paths:
            raise MissingInput("No SVG/EPS/AI files found.")
        return [
            InputFile(index=index, name=path.name, content=path.read_bytes())
            for index, path in enumerate(paths)
        ]
