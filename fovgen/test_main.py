import logging

from fovgen.__main__ import main


def write_config(tmp_path, body):
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_main_writes_files(tmp_path, capsys):
    out_dir = tmp_path / "out"
    config = write_config(tmp_path, f'[output]\ndirectory = "{out_dir.as_posix()}"\n')

    assert main(config) == 0
    assert len(list(out_dir.glob("*.vot"))) == 81
    assert "Writing file 'ZWO-ASI120MM-Sky-Watcher-80ED.vot'" in capsys.readouterr().out


def test_main_first_pair_only(tmp_path):
    out_dir = tmp_path / "out"
    config = write_config(
        tmp_path, f'[output]\ndirectory = "{out_dir.as_posix()}"\nfirst_pair_only = true\n')

    assert main(config) == 0
    assert [p.name for p in out_dir.iterdir()] == ["ZWO-ASI120MM-Sky-Watcher-80ED.vot"]


def test_main_missing_dataset(tmp_path, caplog):
    missing = (tmp_path / "cameras.csv").as_posix()
    config = write_config(
        tmp_path,
        f'[resources]\ncameras = "{missing}"\n[output]\ndirectory = "{tmp_path.as_posix()}"\n')

    with caplog.at_level(logging.ERROR):
        assert main(config) == 1
    assert "Dataset not found" in caplog.text
    assert not list(tmp_path.glob("*.vot"))


def test_main_dataset_not_utf8(tmp_path, caplog):
    optics = tmp_path / "optics.csv"
    optics.write_bytes(b"Optic,Corrector,Focal\nC\xe98,,2032\n")
    config = write_config(
        tmp_path,
        f'[resources]\noptics = "{optics.as_posix()}"\n[output]\ndirectory = "{tmp_path.as_posix()}"\n')

    with caplog.at_level(logging.ERROR):
        assert main(config) == 1
    assert "not valid UTF-8" in caplog.text
    assert not list(tmp_path.glob("*.vot"))
