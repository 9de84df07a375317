"""Tests for the textwire command-line interface."""

import tempfile
from pathlib import Path

import pytest

from textwire.cli.main import create_parser, main


class TestCliTranslate:
    """Test the translate command."""

    def test_translate_with_vars(self, capsys):
        exit_code = main(['translate', 'Hello $who!', '--var', 'who=world'])
        assert exit_code == 0
        assert capsys.readouterr().out == 'Hello world!\n'

    def test_translate_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            workspace = Path(tmpdir)
            (workspace / "vars.yaml").write_text("app:\n  name: demo\n")
            (workspace / "in.txt").write_text("name=$app.name\n")
            out_path = workspace / "out" / "result.txt"

            exit_code = main([
                'translate',
                '--in', str(workspace / "in.txt"),
                '--out', str(out_path),
                '--vars-file', str(workspace / "vars.yaml"),
            ])

            assert exit_code == 0
            assert out_path.read_text() == "name=demo\n"

    def test_var_overrides_file(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            vars_path = Path(tmpdir) / "vars.json"
            vars_path.write_text('{"x": "file"}')
            exit_code = main(['translate', '$x', '--vars-file', str(vars_path), '--var', 'x=cli'])
            assert exit_code == 0
            assert capsys.readouterr().out == 'cli\n'

    def test_bad_var_format(self):
        assert main(['translate', '$x', '--var', 'novalue']) == 2

    def test_missing_vars_file(self):
        assert main(['translate', '$x', '--vars-file', '/nonexistent/vars.yaml']) == 2

    def test_missing_input_file(self):
        assert main(['translate', '--in', '/nonexistent/input.txt']) == 1

    def test_bad_separator(self):
        assert main(['translate', 'x', '--sep0', '%%']) == 2

    def test_custom_separator(self, capsys):
        assert main(['translate', '%a $a', '--sep0', '%', '--var', 'a=1']) == 0
        assert capsys.readouterr().out == '1 $a\n'


class TestCliSubst:
    """Test the subst command."""

    def test_rules(self, capsys):
        exit_code = main(['subst', 'cat and dog', '--rule', 'cat=dog', '--rule', 'dog=cat'])
        assert exit_code == 0
        assert capsys.readouterr().out == 'dog and cat\n'

    def test_rules_file(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            rules_path = Path(tmpdir) / "rules.ini"
            rules_path.write_text("colour=color\n")
            assert main(['subst', 'colour', '--rules-file', str(rules_path)]) == 0
            assert capsys.readouterr().out == 'color\n'


class TestCliEval:
    """Test the eval command."""

    def test_integral_result(self, capsys):
        assert main(['eval', '2^3^2']) == 0
        assert capsys.readouterr().out == '512\n'

    def test_fractional_result(self, capsys):
        assert main(['eval', '1/4']) == 0
        assert capsys.readouterr().out == '0.25\n'

    def test_infinity(self, capsys):
        assert main(['eval', '1/0']) == 0
        assert capsys.readouterr().out == 'inf\n'

    def test_malformed(self, capsys):
        assert main(['eval', '2+']) == 1
        assert capsys.readouterr().out == 'nan\n'

    @pytest.mark.parametrize("expression", ["0/0", "(-8)^0.5"])
    def test_nan_result(self, expression, capsys):
        assert main(['eval', expression]) == 1
        assert capsys.readouterr().out == 'nan\n'


class TestCliMatch:
    """Test the match command."""

    def test_match(self):
        assert main(['match', 'notes.txt', '*.txt']) == 0
        assert main(['match', 'notes.TXT', '*.txt']) == 1
        assert main(['match', 'notes.TXT', '*.txt', '-i']) == 0


class TestCliParser:
    """Test argument parsing."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_unknown_log_level(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(['eval', '1', '--log-level', 'loud'])
