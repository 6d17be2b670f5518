from __future__ import annotations

import io
from pathlib import Path

import pytest
import requests

from json_typegen.main import main


def test_text_input_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--text", '{"user_id": 5}', "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "export interface Root {\n    user_id: number;\n}\n"


def test_file_input_with_alias_and_output_file(tmp_path: Path) -> None:
    source = tmp_path / "data.json"
    source.write_text('{"a": [1, 2, 3]}', encoding="utf-8")
    target = tmp_path / "out.go"

    exit_code = main([str(source), "-l", "golang", "-o", str(target)])

    assert exit_code == 0
    assert target.read_text(encoding="utf-8") == (
        'package main\n\ntype AutoGenerated struct {\n\tA []int `json:"a"`\n}\n'
    )


def test_stdin_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"ok": true}'))

    exit_code = main(["-l", "java", "--root-name", "Status", "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "public class Status {" in captured.out
    assert "public boolean ok;" in captured.out


def test_codegen_options(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        [
            "--text",
            '{"n": 1, "v": null}',
            "-l",
            "go",
            "--package-name",
            "models",
            "--go-int-type",
            "int64",
            "--go-any",
            "--no-color",
        ]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.startswith("package models\n")
    assert '\tN int64 `json:"n"`\n' in captured.out
    assert '\tV any `json:"v"`\n' in captured.out


def test_malformed_json(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--text", "not json", "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Expecting value" in captured.err


def test_unknown_language(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--text", "{}", "-l", "cobol"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "cobol" in captured.err


def test_format_and_minify(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--text", '{"a": [1, 2]}', "--minify"]) == 0
    assert capsys.readouterr().out == '{"a":[1,2]}\n'

    assert main(["--text", '{"a":1}', "--format"]) == 0
    assert capsys.readouterr().out == '{\n    "a": 1\n}\n'


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([str(tmp_path / "missing.json")])

    assert exit_code == 1
    assert "not found" in capsys.readouterr().err


def test_empty_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("   "))

    assert main([]) == 1


def test_conflicting_sources() -> None:
    assert main(["data.json", "--text", "{}"]) == 1


def test_list_languages(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--list-languages"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "typescript" in captured.out
    assert "csharp" in captured.out


def test_language_info(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--language-info", "ts"]) == 0
    assert "typescript" in capsys.readouterr().out

    assert main(["--language-info", "cobol"]) == 1


def test_url_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    response = requests.Response()
    response.status_code = 200
    response._content = b'{"id": 7}'
    response.encoding = "utf-8"
    response.headers["content-type"] = "application/json"
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return response

    monkeypatch.setattr(requests, "get", fake_get)

    exit_code = main(["--url", "https://example.com/item.json", "--timeout", "3", "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert calls == [("https://example.com/item.json", 3)]
    assert captured.out == "export interface Root {\n    id: number;\n}\n"


def test_url_request_failure(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectTimeout("timed out")

    monkeypatch.setattr(requests, "get", fake_get)

    exit_code = main(["--url", "https://example.com/item.json", "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Request timeout" in captured.err


@pytest.mark.parametrize("option, message", [("--indent-size", "indent_size"), ("--max-depth", "max_depth")])
def test_zero_size_options_are_reported(
    option: str, message: str, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["--text", '{"a": 1}', option, "0", "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert f"Invalid {message}: 0" in captured.err
