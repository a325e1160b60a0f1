from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

from structor.domain.errors import PackagingEmpty
from structor.domain.models import ExportArchive, InputFile, NameResult
from structor.domain.naming import sanitize_name

logger = logging.getLogger(__name__)


def archive_entry_name(file: InputFile, names: NameResult) -> str:
    """
    Entry name for one file: the computed name when present, otherwise the
    sanitized original base name. The fallback does not reserve anything.

    Example:
        archive_entry_name(InputFile(1, "Blue_Wave-02.svg", b""), {})
        # 'BlueWave.svg'
    """
    base = names.get(file.index) or sanitize_name(file.base_name)
    return f"{base}.{file.extension}"


class ExportService:
    def __init__(self, archive_name: str = "renamed_files.zip") -> None:
        self._archive_name = archive_name

    def build_archive(self, files: list[InputFile], names: NameResult) -> bytes:
        if not names:
            raise PackagingEmpty("Nothing to export. Run structor first.")

        entries: dict[str, bytes] = {}
        for file in files:
            entry_name = archive_entry_name(file, names)
            if entry_name in entries:
                logger.warning("Archive entry %s replaced by %s", entry_name, file.name)
            entries[entry_name] = file.content

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry_name, content in entries.items():
                archive.writestr(entry_name, content)
        return buffer.getvalue()

    def export(self, files: list[InputFile], names: NameResult) -> ExportArchive:
        return ExportArchive(filename=self._archive_name, data=self.build_archive(files, names))

    def write_archive(
        self, files: list[InputFile], names: NameResult, target_dir: str | Path
    ) -> Path:
        archive = self.export(files, names)
        target = Path(target_dir)
        target.mkdir(parents=True, exist_ok=True)
        path = target / archive.filename
        path.write_bytes(archive.data)
        logger.info("Wrote %d entries to %s", len(files), path)
        return path
