import io
import logging

import pytest

from proptableau import __version__, logger
from proptableau.__main__ import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestDriver:
    def test_sat_with_model(self, capsys):
        assert main(['-f', '(a^-b)']) == 0
        assert capsys.readouterr().out == "SAT\na=true\nb=false\n"

    def test_unsat(self, capsys):
        assert main(['--formula', '(a<->-a)']) == 0
        assert capsys.readouterr().out == "UNSAT\n"

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO("(p\n|\nq)\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "SAT\np=true\nq=false\n"

    def test_parse_error_is_not_unsat(self, capsys):
        assert main(['-f', '(a^b']) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "error: unterminated expression\n"

    @pytest.mark.parametrize("text, expected", [
        ("(a|-a)", "VALID\n"),
        ("(a|b)", "INVALID\n"),
    ])
    def test_validity(self, capsys, text, expected):
        assert main(['--valid', '-f', text]) == 0
        assert capsys.readouterr().out == expected

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--version'])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestLoggingSetup:
    def test_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv('LOG', raising=False)
        assert logger.setup() == 'INFO'
        assert logging.getLogger().level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv('LOG', 'warning')
        assert logger.setup() == 'WARNING'
        assert logging.getLogger().level == logging.WARNING

    def test_debug_mode_wins(self, monkeypatch):
        monkeypatch.setenv('LOG', 'error')
        assert logger.setup(debug_mode=True) == 'DEBUG'

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv('LOG', 'chatty')
        assert logger.setup() == 'INFO'
