import pytest

from structor.adapters.folder_source import FolderSourceAdapter
from structor.domain.errors import MissingInput


def test_list_vector_files_filters_and_orders(tmp_path) -> None:
    (tmp_path / "b_logo.SVG").write_bytes(b"<svg/>")
    (tmp_path / "a_poster.eps").write_bytes(b"%!PS")
    (tmp_path / "notes.txt").write_text("skip")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c_brand.ai").write_bytes(b"%AI")

    files = FolderSourceAdapter().list_vector_files(tmp_path)

    assert [(file.index, file.name) for file in files] == [(0, "a_poster.eps"), (1, "b_logo.SVG")]
    assert files[1].content == b"<svg/>"


def test_list_vector_files_recursive(tmp_path) -> None:
    (tmp_path / "top.svg").write_bytes(b"1")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "brand.ai").write_bytes(b"2")

    files = FolderSourceAdapter().list_vector_files(tmp_path, recursive=True)

    assert [file.name for file in files] == ["brand.ai", "top.svg"]


def test_list_vector_files_without_vectors_raises(tmp_path) -> None:
    (tmp_path / "photo.png").write_bytes(b"png")
    with pytest.raises(MissingInput, match="No SVG/EPS/AI files found"):
        FolderSourceAdapter().list_vector_files(tmp_path)


def test_list_vector_files_missing_folder_raises(tmp_path) -> None:
    with pytest.raises(MissingInput, match="not found"):
        FolderSourceAdapter().list_vector_files(tmp_path / "missing")
