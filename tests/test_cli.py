import io
import logging

from cti.cli import build_arg_parser, build_settings, main
from cti.engine import EOT


def test_build_settings_from_options(tmp_path):
    args = build_arg_parser().parse_args(
        ["--log-file", "a.log", "--log-dir", str(tmp_path), "--log-level", "warning", "--log-json"]
    )
    settings = build_settings(args)
    assert settings.log_file == "a.log"
    assert settings.log_dir == str(tmp_path)
    assert settings.log_level == "WARNING"
    assert settings.log_json is True
    assert settings.logging_enabled is True


def test_disable_logging_option():
    args = build_arg_parser().parse_args(["--disable-logging"])
    assert build_settings(args).logging_enabled is False


def test_help_exits_zero(capsys):
    out = io.StringIO()
    assert main(["--help"], io.StringIO("echo hi\n"), out) == 0
    assert "--disable-logging" in capsys.readouterr().out
    assert out.getvalue() == ""


def test_bad_option_exits_one(capsys):
    assert main(["--no-such-option"], io.StringIO(""), io.StringIO()) == 1
    assert "--no-such-option" in capsys.readouterr().err


def test_bad_log_level_exits_one(capsys):
    assert main(["--log-level", "LOUD"], io.StringIO(""), io.StringIO()) == 1


def test_runs_session(tmp_path):
    out = io.StringIO()
    code = main(
        ["--log-dir", str(tmp_path), "--log-file", "cli.log"],
        io.StringIO("echo from cli\nquit\n"),
        out,
    )
    assert code == 0
    assert out.getvalue() == f"> {EOT}= from cli\n{EOT}\n> {EOT}= \n{EOT}\n"
    assert "Accept command: echo from cli" in (tmp_path / "cli.log").read_text()


def test_log_open_failure_exits_one(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    code = main(["--log-dir", str(blocker)], io.StringIO("quit\n"), io.StringIO())
    assert code == 1


def test_stream_error_exits_one(tmp_path, capsys):
    class BrokenStream(io.StringIO):
        def readline(self, *args):
            raise OSError("stream closed")

    code = main(["--disable-logging"], BrokenStream(), io.StringIO())
    assert code == 1
    assert "stream closed" in capsys.readouterr().err


def test_log_stderr_option():
    args = build_arg_parser().parse_args(["--log-stderr"])
    assert build_settings(args).log_stderr is True
    assert build_settings(build_arg_parser().parse_args([])).log_stderr is False


def test_disabled_logging_writes_nothing_to_stderr(capsys, monkeypatch):
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    out = io.StringIO()
    assert main(["--disable-logging"], io.StringIO("bogus\nquit\n"), out) == 0
    assert "? unknown command: bogus" in out.getvalue()
    assert capsys.readouterr().err == ""
