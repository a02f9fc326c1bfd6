import pytest

from tran_receiver import __main__ as entry
from tran_receiver.exceptions import ConfigurationError


def raising(exc):
    def app():
        raise exc

    return app


@pytest.mark.parametrize(
    "exc, code",
    [
        (ConfigurationError("bad padding"), 1),
        (RuntimeError("unexpected"), 1),
        (KeyboardInterrupt(), 0),
    ],
)
def test_main_exit_codes(monkeypatch, capsys, exc, code):
    monkeypatch.setattr(entry, "app", raising(exc))
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == code


def test_main_reports_application_errors(monkeypatch, capsys):
    monkeypatch.setattr(entry, "app", raising(ConfigurationError("bad padding")))
    with pytest.raises(SystemExit):
        entry.main()
    assert "bad padding" in capsys.readouterr().err


def test_main_returns_normally_on_clean_exit(monkeypatch):
    monkeypatch.setattr(entry, "app", lambda: None)
    entry.main()
