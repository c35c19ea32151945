"""
Copyright (C) 2025 boardVerify Contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""
Rich-based logging utility for boardVerify.

This module provides a consistent logging approach using Rich for the entire boardVerify codebase.
Diagnostics go to stderr so that verdicts printed on stdout stay machine readable.
"""

from typing import Optional, Any

from rich.console import Console
from rich.traceback import install as install_rich_traceback
from rich.theme import Theme

# Define a custom theme for our logs
CUSTOM_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "debug": "dim white",
    "success": "green",
    "move": "bold magenta",
})

# Console for diagnostics
console = Console(theme=CUSTOM_THEME, stderr=True)

# Console for results
stdout_console = Console(theme=CUSTOM_THEME, highlight=False)

# Install Rich traceback handler (not verbose)
install_rich_traceback(show_locals=False, width=None, word_wrap=True, console=console)


def move_log(message: str, **kwargs: Any) -> None:
    """
    Log a message about a replayed move.

    Args:
        message (str): message to log
        **kwargs (Any): extra arguments
    """
    console.log(f"[move]MOVE:[/move] {message}", **kwargs)
# end def move_log


def info(message: str, **kwargs: Any) -> None:
    """
    Log an informational message.

    Args:
        message: The message to log
        **kwargs: Additional arguments to pass to console.log
    """
    console.log(f"[info]INFO:[/info] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """
    Log a warning message.

    Args:
        message: The message to log
        **kwargs: Additional arguments to pass to console.log
    """
    console.log(f"[warning]WARNING:[/warning] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """
    Log an error message.

    Args:
        message: The message to log
        **kwargs: Additional arguments to pass to console.log
    """
    console.log(f"[error]ERROR:[/error] {message}", **kwargs)


def debug(message: str, **kwargs: Any) -> None:
    """
    Log a debug message.

    Args:
        message: The message to log
        **kwargs: Additional arguments to pass to console.log
    """
    console.log(f"[debug]DEBUG:[/debug] {message}", **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """
    Log a success message.

    Args:
        message: The message to log
        **kwargs: Additional arguments to pass to console.log
    """
    console.log(f"[success]SUCCESS:[/success] {message}", **kwargs)


def result(message: str) -> None:
    """
    Print a result line on stdout, without markup or highlighting.

    Args:
        message: The line to print
    """
    stdout_console.print(message, markup=False, soft_wrap=True)


def print_exception(show_locals: bool = False, **kwargs: Any) -> None:
    """
    Print the current exception with a traceback.

    Args:
        show_locals: Whether to show local variables in the traceback
        **kwargs: Additional arguments to pass to console.print_exception
    """
    console.print_exception(show_locals=show_locals, **kwargs)


def log_exception(message: Optional[str] = None, show_locals: bool = False, **kwargs: Any) -> None:
    """
    Log an exception with an optional message.

    Args:
        message: An optional message to display before the exception
        show_locals: Whether to show local variables in the traceback
        **kwargs: Additional arguments to pass to console.print_exception
    """
    if message:
        error(message)
    print_exception(show_locals=show_locals, **kwargs)
