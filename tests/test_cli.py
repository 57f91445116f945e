import io
import json

import pytest

from swapem.cli.main import SwapemCLI, main

COLORS = json.dumps({"color": {"red": "#ff0000", "blue": "#0000ff"}})


def run_cli(*argv) -> int:
    return SwapemCLI().run(list(argv))


def test_inline_input_to_stdout(capsys):
    code = run_cli("--input-inline", "The color is <!color.red!>", "-t", "<! . !>", "--data-inline", COLORS)

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "The color is #ff0000"


def test_file_to_file(tmp_path, capsys):
    source = tmp_path / "input.css"
    source.write_text("a { color: var(--color-red); }", encoding="utf-8")
    data_file = tmp_path / "data.json"
    data_file.write_text(COLORS, encoding="utf-8")
    target = tmp_path / "output.css"

    code = run_cli(
        "--input-file", str(source),
        "--data-file", str(data_file),
        "--template", "var(-- - )",
        "-o", str(target),
        "--chunk-size", "2",
    )

    assert code == 0
    assert target.read_text(encoding="utf-8") == "a { color: #ff0000; }"
    assert capsys.readouterr().out == ""


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bg: <!color.blue!>\n"))

    code = run_cli("-t", "<! . !>", "--data-inline", COLORS)

    assert code == 0
    assert capsys.readouterr().out == "bg: #0000ff\n"


def test_resolution_error_exit_code(capsys):
    code = run_cli("--input-inline", "<!color.green!>", "-t", "<! . !>", "--data-inline", COLORS)

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Unresolvable Swap Path" in captured.err


def test_template_error_exit_code(capsys):
    code = run_cli("--input-inline", "x", "-t", "<!>", "--data-inline", COLORS)

    assert code == 1
    assert "Invalid Template" in capsys.readouterr().err


def test_invalid_data_exit_code(capsys):
    code = run_cli("--input-inline", "x", "-t", "<! . !>", "--data-inline", '{"a": 1}')

    assert code == 1
    assert "InvalidSwapData" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    code = run_cli("--input-file", str(tmp_path / "nope.txt"), "-t", "<! . !>", "--data-inline", COLORS)
    assert code == 1


@pytest.mark.parametrize("argv", [
    ["-t", "<! . !>"],
    ["--data-inline", "{}"],
    ["-t", "<! . !>", "--data-inline", "{}", "--data-file", "d.json"],
    ["-t", "<! . !>", "--data-inline", "{}", "--input-inline", "a", "--input-file", "a.txt"],
])
def test_argument_errors(argv):
    with pytest.raises(SystemExit) as exc:
        run_cli(*argv)
    assert exc.value.code == 2


def test_verbose_summary_goes_to_stderr(capsys):
    code = run_cli("--input-inline", "<!color.red!>", "-t", "<! . !>", "--data-inline", COLORS, "--verbose")

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "#ff0000"
    assert "Swapem Run Report" in captured.err


def test_main_exits_with_code(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--input-inline", "<!color.red!>", "-t", "<! . !>", "--data-inline", COLORS])

    assert exc.value.code == 0
    assert capsys.readouterr().out == "#ff0000"
