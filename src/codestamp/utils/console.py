"""Console utility functions for formatting and output."""

from typing import Any, Optional

import click
from colorama import Fore, Style, init
from rich.console import Console
from rich.panel import Panel

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'check': '✅',
    'stamp': '🔏',
    'warning': '⚠️',
    'error': '❌',
    'info': '💡',
}

_COLORAMA_COLORS = {
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
    'dim': Fore.WHITE,
}


def _get_console(err: bool = False) -> Optional[Console]:
    """Get a Rich console bound to stdout, or stderr when ``err`` is set."""
    try:
        return Console(stderr=err, highlight=False, soft_wrap=True)
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None, err: bool = False):
    """Echo message with Rich formatting or colorama fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console(err=err)
    if console:
        try:
            style = f"bold {color}" if bold else color
            console.print(message, style=style, markup=False, emoji=False)
            return
        except Exception:
            pass

    # Colorama fallback
    color_code = _COLORAMA_COLORS.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}", err=err)


def _rich_success(message: str, symbol: str = None):
    """Display success message in green."""
    _rich_echo(message, color="green", symbol=symbol)


def _rich_error(message: str, symbol: str = None):
    """Display error message in red on stderr."""
    _rich_echo(message, color="red", symbol=symbol, err=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message in yellow on stderr."""
    _rich_echo(message, color="yellow", symbol=symbol, err=True)


def _rich_info(message: str, symbol: str = None):
    """Display info message in blue."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_print(renderable: Any, err: bool = False):
    """Print a Rich renderable, falling back to its plain text."""
    console = _get_console(err=err)
    if console:
        try:
            console.print(renderable)
            return
        except Exception:
            pass
    click.echo(str(renderable), err=err)


def _rich_panel(content: str, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel with fallback."""
    console = _get_console()
    if console:
        try:
            console.print(Panel(content, title=title, border_style=style))
            return
        except Exception:
            pass

    if title:
        click.echo(f"\n--- {title} ---")
    click.echo(content)
    if title:
        click.echo("-" * (len(title) + 8))
