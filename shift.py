#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LETTER SHIFT
━━━━━━━━━━━━
Substitution of every alphabet letter by the one OFFSET positions later:
  1. Fixed alphabet with wraparound at the end
  2. Separator-delimited segments are kept as they are
  3. Characters outside the alphabet pass through unchanged
  4. --decode applies the inverse offset
"""

import sys
import logging
import argparse
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from shift_encode import (
    DICT, SEPARATOR, OFFSET,
    ShiftCipher, ShiftCipherError,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """RichHandler on stderr; WARNING by default, DEBUG with --verbose"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# UI
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self, console: Optional[Console] = None):
        self.c = console or Console()

    def header(self):
        self.c.print(Panel(
            "[bold cyan]LETTER SHIFT[/bold cyan]\n"
            "[dim]Fixed alphabet • Wraparound • Separator kept[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def info(self, cipher: ShiftCipher, decode: bool):
        mode = "[yellow]decode[/yellow]" if decode else "[green]encode[/green]"
        self.c.print(Panel(
            f"🔤 Alphabet: [bold]{escape(cipher.alphabet)}[/bold] ({cipher.size})\n"
            f"🔑 Offset: [bold]{cipher.offset}[/bold]\n"
            f"✂️  Separator: [bold]{escape(repr(cipher.separator))}[/bold]\n"
            f"📊 Mode: {mode}",
            title="[bold]Configuration[/bold]", border_style="blue"
        ))
        self.c.print()

    def result(self, source: str, result: str, separator: str = SEPARATOR):
        self.c.print("[bold green]💬 RESULT:[/bold green]")
        self.c.print()
        self.c.print(result, markup=False, highlight=False)
        self.c.print()
        self.c.print(
            f"[dim]📏 {len(source)} chars  "
            f"✂️  {len(result.split(separator))} segments[/dim]"
        )

    def mapping(self, cipher: ShiftCipher):
        tbl = Table(
            box=box.SIMPLE, show_header=True,
            header_style="bold magenta", title="[bold]Substitution[/bold]"
        )
        tbl.add_column("Plain", style="cyan")
        tbl.add_column("Shifted", style="yellow")
        for plain, shifted in cipher.mapping():
            tbl.add_row(escape(plain), escape(shifted))
        self.c.print(tbl)

    def error(self, message: str):
        Console(stderr=True).print(f"[bold red]❌ {escape(message)}[/bold red]")

    def ask_multiline(self, prompt: str) -> str:
        """Multi-line input: an empty line or Ctrl+D ends it"""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](empty line = end of input)[/dim]")

        lines = []
        try:
            while True:
                line = self.c.input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════

def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='letter-shift',
        description='Letter Shift: substitutes each alphabet letter by the one OFFSET positions later',
    )
    p.add_argument('text', nargs='*', help='Text to convert')
    p.add_argument('-d', '--decode', action='store_true',
                   help='Apply the inverse offset')
    p.add_argument('-k', '--offset', type=int, default=OFFSET,
                   help=f'Shift distance, any integer (default: {OFFSET})')
    p.add_argument('-a', '--alphabet', default=DICT,
                   help=f'Ordered alphabet of distinct characters (default: {DICT})')
    p.add_argument('-s', '--separator', default=SEPARATOR,
                   help='Single separator character (default: space)')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Print only the converted text (for pipes)')
    p.add_argument('-t', '--table', action='store_true',
                   help='Print the substitution table')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Debug logging on stderr')
    return p.parse_args(argv)


def run(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    ui = UI()

    try:
        cipher = ShiftCipher(args.alphabet, args.separator, args.offset)
    except ShiftCipherError as e:
        ui.error(str(e))
        return 2

    if args.text:
        text = ' '.join(args.text)
        interactive = False
    elif not sys.stdin.isatty():
        text = sys.stdin.read().rstrip('\n')
        interactive = False
    else:
        if args.raw:
            ui.error("--raw needs the text as arguments or on a pipe")
            return 1
        ui.header()
        text = ui.ask_multiline("Enter text:")
        interactive = True

    logger.debug("input: %d chars, decode=%s", len(text), args.decode)
    result = cipher.decode(text) if args.decode else cipher.encode(text)

    # --- RAW MODE ---
    if args.raw:
        print(result)
        return 0

    # --- FULL UI MODE ---
    if not interactive:
        ui.header()
    ui.info(cipher, args.decode)
    if args.table:
        ui.mapping(cipher)
        ui.c.print()
    ui.result(text, result, cipher.separator)
    return 0


def main():
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n👋")


if __name__ == '__main__':
    main()
