"""Tests for the beautify command line."""

import pytest

from beautification.cli import main
from beautification.cli.parser import create_parser

UPPERCASE = "sample_providers:UppercaseProvider"
STRIP = "sample_providers:StripTrailingProvider"


@pytest.fixture(autouse=True)
def no_env_providers(monkeypatch):
    """Keep BEAUTIFY_PROVIDERS from the environment out of the tests."""
    monkeypatch.delenv("BEAUTIFY_PROVIDERS", raising=False)


class TestParser:
    """Test argument parsing."""

    def test_repeatable_providers(self):
        """--provider collects every value in order."""
        parsed = create_parser().parse_args(["-p", "a:A", "-p", "b:B", "file.js"])

        assert parsed.providers == ["a:A", "b:B"]
        assert parsed.files == ["file.js"]

    def test_stdout_and_check_exclusive(self):
        """--stdout and --check cannot be combined."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--stdout", "--check", "f.txt"])


class TestMain:
    """Test the beautify command end to end."""

    def test_rewrites_file(self, temp_dir, capsys):
        """Changed files are written back."""
        path = temp_dir / "notes.txt"
        path.write_text("hello\n", encoding="utf-8")

        code = main(["-p", UPPERCASE, str(path)])

        assert code == 0
        assert path.read_text(encoding="utf-8") == "HELLO\n"
        assert f"beautified {path}" in capsys.readouterr().out

    def test_check_reports_without_writing(self, temp_dir, capsys):
        """--check exits 1 and leaves the file alone."""
        path = temp_dir / "notes.md"
        path.write_text("hello", encoding="utf-8")

        code = main(["--check", "-p", UPPERCASE, str(path)])

        assert code == 1
        assert path.read_text(encoding="utf-8") == "hello"
        assert f"would beautify {path}" in capsys.readouterr().out

    def test_check_passes_when_nothing_to_do(self, temp_dir):
        """--check exits 0 when every provider declines."""
        path = temp_dir / "notes.txt"
        path.write_text("DONE", encoding="utf-8")

        assert main(["--check", "-p", UPPERCASE, str(path)]) == 0

    def test_stdout(self, temp_dir, capsys):
        """--stdout prints the result and keeps the file."""
        path = temp_dir / "app.js"
        path.write_text("var a;   \n", encoding="utf-8")

        code = main(["--stdout", "-p", UPPERCASE, "-p", STRIP, str(path)])

        assert code == 0
        assert capsys.readouterr().out == "var a;\n"
        assert path.read_text(encoding="utf-8") == "var a;   \n"

    def test_language_override(self, temp_dir):
        """-l replaces the extension-based language."""
        path = temp_dir / "app.js"
        path.write_text("abc", encoding="utf-8")

        main(["-l", "markdown", "-p", UPPERCASE, str(path)])

        assert path.read_text(encoding="utf-8") == "ABC"

    def test_providers_from_environment(self, temp_dir, monkeypatch):
        """BEAUTIFY_PROVIDERS is used when no --provider is given."""
        monkeypatch.setenv("BEAUTIFY_PROVIDERS", f"{STRIP}, {UPPERCASE}")
        path = temp_dir / "notes.txt"
        path.write_text("a  \n", encoding="utf-8")

        assert main([str(path)]) == 0
        assert path.read_text(encoding="utf-8") == "A  \n"

    def test_no_providers(self, temp_dir, capsys):
        """Without providers the command is a usage error."""
        path = temp_dir / "notes.txt"
        path.write_text("x", encoding="utf-8")

        assert main([str(path)]) == 2
        assert "No providers" in capsys.readouterr().err

    def test_bad_provider(self, temp_dir, capsys):
        """Unloadable providers fail with exit code 1."""
        path = temp_dir / "notes.txt"
        path.write_text("x", encoding="utf-8")

        assert main(["-p", "nowhere:Nothing", str(path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_file(self, temp_dir, capsys):
        """Missing files are reported; other files are still processed."""
        good = temp_dir / "good.txt"
        good.write_text("ok", encoding="utf-8")

        code = main(["-p", UPPERCASE, str(temp_dir / "missing.txt"), str(good)])

        assert code == 1
        assert good.read_text(encoding="utf-8") == "OK"
        assert "missing.txt" in capsys.readouterr().err
