import json

import pytest

from modules.base_convert.core.radix import ManualStrategy
from modules.base_convert.tool.menu import ConsoleFormatter, Menu, main


pytestmark = pytest.mark.usefixtures("fresh_strategy")


def _scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def _output(console):
    return console.file.getvalue()


def test_menu_converts_until_exit(console):
    menu = Menu(
        ConsoleFormatter(console),
        strategy=ManualStrategy(),
        input_fn=_scripted("1", "255", "3", "2a", "5"),
    )
    assert menu.run() == 0
    text = _output(console)
    assert "Binary: 11111111" in text
    assert "Hexadecimal: FF" in text
    assert "Decimal: 42" in text
    assert "Binary: 101010" in text
    assert "Goodbye!" in text


def test_menu_reports_errors_and_continues(console):
    menu = Menu(
        ConsoleFormatter(console),
        strategy=ManualStrategy(),
        input_fn=_scripted("9", "2", "102", "2", "", "5"),
    )
    assert menu.run() == 0
    text = _output(console)
    assert "Invalid choice, try again." in text
    assert "Invalid digit for base 2: 2" in text
    assert "Binary value is required." in text


def test_menu_exits_on_eof(console):
    def closed(prompt):
        raise EOFError

    assert Menu(ConsoleFormatter(console), input_fn=closed).run() == 0
    assert "Goodbye!" in _output(console)


def test_menu_shows_system_info(console, monkeypatch):
    monkeypatch.setenv("SPARKY_BASE_CONVERT_STRATEGY", "manual")
    menu = Menu(ConsoleFormatter(console), input_fn=_scripted("4", "5"))
    menu.run()
    text = _output(console)
    assert "System information:" in text
    assert "Conversion: manual" in text


def test_menu_shows_overflow_warning(console, monkeypatch):
    monkeypatch.setenv("SPARKY_NATIVE_WORD_BITS", "32")
    menu = Menu(
        ConsoleFormatter(console),
        strategy=ManualStrategy(),
        input_fn=_scripted("2", "1" * 32, "5"),
    )
    menu.run()
    text = _output(console)
    assert "Warning: Number may be too large for a 32-bit system." in text
    assert "Decimal: 4294967295" in text


def test_one_shot(console):
    assert main(["--from", "dec", "255", "--strategy", "manual"], console=console) == 0
    assert "Hexadecimal: FF" in _output(console)


def test_one_shot_json(console):
    assert main(["--from", "hex", "2a", "--json", "--strategy", "manual"], console=console) == 0
    payload = json.loads(_output(console))
    assert payload["decimal"] == "42"
    assert payload["binary"] == "101010"


def test_one_shot_invalid_input(console):
    assert main(["--from", "bin", "102", "--strategy", "manual"], console=console) == 1
    assert "Invalid digit" in _output(console)


def test_hex_results_list_decimal_before_binary(console):
    assert main(["--from", "hex", "2A", "--strategy", "manual"], console=console) == 0
    text = _output(console)
    assert text.index("Decimal: 42") < text.index("Binary: 101010")


def test_bad_configured_strategy_is_a_usage_error(console, monkeypatch, capsys):
    monkeypatch.setenv("SPARKY_BASE_CONVERT_STRATEGY", "slide-rule")
    with pytest.raises(SystemExit) as excinfo:
        main(["--from", "dec", "1"], console=console)
    assert excinfo.value.code == 2
    assert "SPARKY_BASE_CONVERT_STRATEGY" in capsys.readouterr().err
