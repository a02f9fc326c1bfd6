import pytest
from typer.testing import CliRunner

from tran_receiver import __version__
from tran_receiver.cli import app as cli_app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(cli_app, "CONFIG_FILE", tmp_path / "config.ini")
    return tmp_path / "config.ini"


def write_events(tmp_path, *lines):
    path = tmp_path / "events.jsonl"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_version():
    result = runner.invoke(cli_app.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_finished_session(tmp_path):
    events = write_events(
        tmp_path,
        '{"kind": "file_info", "bytes": 1000}',
        '{"kind": "progress", "progress": 0.5}',
        '{"kind": "finished", "files": ["a.txt", "dir/b.txt"], "payload_size": 2048}',
    )
    result = runner.invoke(
        cli_app.app, ["render", str(events), "--no-color", "--width", "60"]
    )
    assert result.exit_code == 0, result.output
    assert "Received 2 files (2.0 kB decompressed)" in result.output
    assert "Received: a.txt, dir (1 file)" in result.output


def test_render_error_session(tmp_path):
    events = write_events(
        tmp_path,
        '{"kind": "progress", "progress": 0.5}',
        '{"kind": "error", "message": "boom"}',
    )
    result = runner.invoke(cli_app.app, ["render", str(events), "--no-color"])
    assert result.exit_code == 0, result.output
    assert result.output == "boom"


def test_render_rejects_bad_events(tmp_path):
    events = write_events(tmp_path, '{"kind": "teleport"}')
    result = runner.invoke(cli_app.app, ["render", str(events)])
    assert result.exit_code != 0


def test_init_writes_config(isolated_config):
    result = runner.invoke(cli_app.app, ["init"])
    assert result.exit_code == 0, result.output
    assert isolated_config.is_file()
    assert "padding = 2" in isolated_config.read_text(encoding="utf-8")


def test_init_refuses_overwrite_without_confirmation(isolated_config):
    isolated_config.write_text("[DEFAULT]\npadding = 5\n", encoding="utf-8")
    result = runner.invoke(cli_app.app, ["init"], input="n\n")
    assert result.exit_code != 0
    assert "padding = 5" in isolated_config.read_text(encoding="utf-8")


def test_show_config(isolated_config):
    isolated_config.write_text("[DEFAULT]\npadding = 5\n", encoding="utf-8")
    result = runner.invoke(cli_app.app, ["--show-config"])
    assert result.exit_code == 0, result.output
    assert "padding" in result.output
