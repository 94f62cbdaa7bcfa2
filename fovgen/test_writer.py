import pytest

from fovgen.writer import write_vot_file


def test_write_in_directory(tmp_path):
    path = write_vot_file("a.vot", "<VOTABLE/>", tmp_path)
    assert path == tmp_path / "a.vot"
    assert path.read_text(encoding="utf-8") == "<VOTABLE/>"


def test_write_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_vot_file("b.vot", "content")
    assert (tmp_path / "b.vot").read_text(encoding="utf-8") == "content"


def test_existing_file_is_truncated(tmp_path):
    write_vot_file("a.vot", "a much longer first version", tmp_path)
    write_vot_file("a.vot", "short", tmp_path)
    assert (tmp_path / "a.vot").read_text(encoding="utf-8") == "short"


def test_content_is_utf8(tmp_path):
    write_vot_file("c.vot", "Caméra Σ", tmp_path)
    assert (tmp_path / "c.vot").read_bytes() == "Caméra Σ".encode("utf-8")


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_vot_file("a.vot", "x", tmp_path / "missing")
