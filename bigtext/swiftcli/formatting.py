"""Utility functions for console messages."""

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def format_error(message: str, title: str = "Error") -> None:
    """
    Format and display error message on stderr.

    Args:
        message: Error message
        title: Error title
    """
    err_console.print(f"[bold red]{title}:[/] {escape(message)}", markup=True, highlight=False)

