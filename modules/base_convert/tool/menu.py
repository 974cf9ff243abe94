#!/usr/bin/env python3
"""Interactive terminal front end for the base converter.

Run without arguments for the menu, or convert a single value::

    sparky-base-convert --from hex 2a
    sparky-base-convert --from bin 101010 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from modules.base_convert.core.base import convert
from modules.base_convert.core.numeral import Radix, ValidationError
from modules.base_convert.core.radix import (
    STRATEGY_CHOICES,
    RadixStrategy,
    configured_bc_path,
    default_strategy,
    select_strategy,
)
from modules.base_convert.core.result import ConversionResult
from modules.base_convert.core.system import system_info
from universe.settings import configure_logging

logger = logging.getLogger(__name__)

DISPLAY_ORDER = (Radix.DECIMAL, Radix.BINARY, Radix.HEXADECIMAL)

RADIX_STYLES = {
    Radix.DECIMAL: "blue",
    Radix.BINARY: "green",
    Radix.HEXADECIMAL: "yellow",
}

MENU_CHOICES = {
    "1": Radix.DECIMAL,
    "2": Radix.BINARY,
    "3": Radix.HEXADECIMAL,
}
SYSTEM_CHOICE = "4"
EXIT_CHOICE = "5"


class ConsoleFormatter:
    """Colored console output; tests pass a Console writing to a buffer."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def rule(self) -> None:
        self.console.print("[blue]=================================[/blue]")

    def line(self, text: str = "") -> None:
        self.console.print(escape(text))

    def error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def field(self, label: str, value: str, style: str = "blue") -> None:
        self.console.print(f"[{style}]{escape(label)}:[/{style}] {escape(value)}")

    def result(self, result: ConversionResult) -> None:
        if result.warning:
            self.warning(result.warning.message)
        for radix in DISPLAY_ORDER:
            if radix is result.source.radix:
                continue
            self.field(radix.label, result.digits_for(radix), RADIX_STYLES[radix])

    def system(self, info: dict) -> None:
        self.console.print("[blue]System information:[/blue]")
        self.line(f"  OS: {info['system']} {info['release']}")
        self.line(f"  Architecture: {info['architecture']}")
        self.line(f"  Native word size: {info['native_word_bits']} bits")
        bc = info["bc"]
        if bc["installed"]:
            self.line(f"  bc: installed ({bc['version'] or 'unknown version'})")
        else:
            self.console.print("  bc: [red]not installed[/red]")
            for hint in bc["install_hint"]:
                self.line(f"    {hint}")
        if info["homebrew"]:
            self.line("  Homebrew: installed")
        self.line(f"  Conversion: {info['strategy']}")


class Menu:
    def __init__(
        self,
        formatter: ConsoleFormatter,
        *,
        strategy: RadixStrategy | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self.formatter = formatter
        self.strategy = strategy
        self.input_fn = input_fn

    def show(self) -> None:
        fmt = self.formatter
        fmt.rule()
        fmt.line("Number base converter")
        fmt.rule()
        fmt.line("Choose an operation:")
        fmt.line("1) Decimal -> Binary and Hexadecimal")
        fmt.line("2) Binary -> Decimal and Hexadecimal")
        fmt.line("3) Hexadecimal -> Decimal and Binary")
        fmt.line("4) Show system information")
        fmt.line("5) Exit")
        fmt.rule()

    def prompt_conversion(self, radix: Radix) -> bool:
        raw = self.input_fn(f"Enter a {radix.label.lower()} number: ")
        try:
            result = convert(raw, radix, strategy=self.strategy)
        except ValidationError as exc:
            self.formatter.error(exc.message)
            return False
        self.formatter.result(result)
        return True

    def step(self, choice: str) -> bool:
        """Handle one menu choice; False means the loop should stop."""
        choice = choice.strip()
        if choice in MENU_CHOICES:
            self.prompt_conversion(MENU_CHOICES[choice])
        elif choice == SYSTEM_CHOICE:
            self.formatter.system(system_info())
        elif choice == EXIT_CHOICE:
            self.formatter.success("Goodbye!")
            return False
        else:
            self.formatter.error("Invalid choice, try again.")
        self.formatter.line()
        return True

    def run(self) -> int:
        while True:
            self.show()
            try:
                choice = self.input_fn("Enter operation number: ")
                if not self.step(choice):
                    return 0
            except (EOFError, KeyboardInterrupt):
                self.formatter.line()
                self.formatter.success("Goodbye!")
                return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sparky-base-convert",
        description="Convert numbers between decimal, binary, and hexadecimal.",
    )
    parser.add_argument(
        "--from",
        dest="base_from",
        choices=["dec", "bin", "hex"],
        help="Source base for a one-shot conversion of VALUE.",
    )
    parser.add_argument("value", nargs="?", help="Value to convert (requires --from).")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument(
        "--strategy",
        choices=STRATEGY_CHOICES,
        help="Radix renderer: auto, bc, or manual (default: SPARKY_BASE_CONVERT_STRATEGY).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: SPARKY_LOG_LEVEL).")
    return parser


def run_once(
    formatter: ConsoleFormatter,
    base_from: str,
    value: str,
    *,
    strategy: RadixStrategy | None = None,
    as_json: bool = False,
) -> int:
    try:
        result = convert(value, Radix.parse(base_from), strategy=strategy)
    except ValidationError as exc:
        if as_json:
            formatter.console.print_json(json.dumps(exc.as_dict()))
        else:
            formatter.error(exc.message)
        return 1
    if as_json:
        formatter.console.print_json(json.dumps(result.as_dict()))
    else:
        formatter.result(result)
    return 0


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.value is not None and args.base_from is None:
        parser.error("VALUE requires --from")
    if args.base_from is not None and args.value is None:
        parser.error("--from requires VALUE")

    try:
        if args.strategy:
            strategy = select_strategy(args.strategy, configured_bc_path())
        else:
            strategy = default_strategy()
    except ValueError as exc:
        parser.error(str(exc))
    logger.debug("Radix strategy: %s", strategy.name)

    formatter = ConsoleFormatter(console)
    if args.base_from:
        return run_once(formatter, args.base_from, args.value, strategy=strategy, as_json=args.json)
    return Menu(formatter, strategy=strategy).run()


if __name__ == "__main__":
    sys.exit(main())
