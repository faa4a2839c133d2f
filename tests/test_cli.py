"""Tests for the stringkit command-line interface.

WHY: The CLI is the only entry point that touches files, stdin and exit
codes. Those seams (argument parsing, JSON loading, schema validation and
error reporting) are where regressions show up first.

HOW: main() is called in-process with an argv list; stdout/stderr are
captured with capsys and stdin is replaced with an io.StringIO.
"""

import io
import json

import pytest

from stringkit.cli import load_template_vars, main


class TestTextCommands:
    def test_slugify(self, capsys):
        assert main(["slugify", "Hello World!"]) == 0
        assert capsys.readouterr().out == "hello-world\n"

    def test_slugify_separator_and_case(self, capsys):
        assert main(["slugify", "Hello World", "--separator", "_", "--keep-case"]) == 0
        assert capsys.readouterr().out == "Hello_World\n"

    @pytest.mark.parametrize("target, expected", [
        ("snake", "hello_world"),
        ("kebab", "hello-world"),
        ("camel", "helloWorld"),
        ("constant", "HELLO_WORLD"),
    ])
    def test_case(self, capsys, target, expected):
        assert main(["case", "Hello World", "--to", target]) == 0
        assert capsys.readouterr().out == expected + "\n"

    def test_wrap(self, capsys):
        assert main(["wrap", "The quick brown fox", "--width", "10"]) == 0
        assert capsys.readouterr().out == "The quick\nbrown fox\n"

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("Crème Brûlée\n"))
        assert main(["slugify", "-"]) == 0
        assert capsys.readouterr().out == "creme-brulee\n"


class TestDistance:
    def test_distance(self, capsys):
        assert main(["distance", "kitten", "sitting"]) == 0
        assert capsys.readouterr().out == "3\n"

    def test_similarity(self, capsys):
        assert main(["distance", "abcd", "abcf", "--similarity"]) == 0
        assert capsys.readouterr().out == "0.7500\n"


class TestTemplateCommand:
    """template sub-command and its jsonschema-validated variables file."""

    def test_renders(self, capsys, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text(json.dumps({"name": "Ada", "n": 3}), encoding="utf-8")
        assert main(["template", "Hi {name} #{n}", "--vars", str(path)]) == 0
        assert capsys.readouterr().out == "Hi Ada #3\n"

    def test_strict(self, capsys, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("{}", encoding="utf-8")
        assert main(["template", "Hi {name}.", "--vars", str(path), "--strict"]) == 0
        assert capsys.readouterr().out == "Hi .\n"

    def test_nested_value_rejected(self, capsys, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text(json.dumps({"name": {"first": "Ada"}}), encoding="utf-8")
        assert main(["template", "Hi {name}", "--vars", str(path)]) == 1
        assert "invalid template variables" in capsys.readouterr().err

    def test_non_object_rejected(self, tmp_path):
        import jsonschema

        path = tmp_path / "vars.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(jsonschema.ValidationError):
            load_template_vars(str(path))

    def test_bad_json(self, capsys, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["template", "x", "--vars", str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_missing_file(self, capsys, tmp_path):
        assert main(["template", "x", "--vars", str(tmp_path / "nope.json")]) == 1
        assert capsys.readouterr().err.startswith("Error: ")


class TestListCommand:
    def test_single_item(self, capsys):
        assert main(["list", "solo"]) == 0
        assert capsys.readouterr().out == "solo\n"

    def test_unknown_kind_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["list", "a", "b", "--kind", "bogus"])
        assert exc.value.code == 2


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "stringkit" in capsys.readouterr().out
