import pytest

from appx_toolkit import pipeline_utils


def test_warn_prints_to_stderr(capsys) -> None:
    pipeline_utils.warn("image skipped")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Warning: image skipped\n"


def test_require_file_returns_existing_path(tmp_path) -> None:
    path = tmp_path / "config.xml"
    path.write_text("<widget/>", encoding="utf-8")
    assert pipeline_utils.require_file(str(path), "config") == str(path)


def test_require_file_exits_when_missing(tmp_path) -> None:
    with pytest.raises(SystemExit) as e:
        pipeline_utils.require_file(str(tmp_path / "nope.xml"), "config")
    assert str(e.value) == f"Error: config not found: {tmp_path / 'nope.xml'}"


def test_require_file_rejects_directory(tmp_path) -> None:
    with pytest.raises(SystemExit):
        pipeline_utils.require_file(str(tmp_path), "manifest")
