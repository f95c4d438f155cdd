# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI utility functions for output formatting."""

from rich.console import Console

console = Console()


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def format_status(status: str, is_success: bool) -> str:
    """Format status with color (green=success, dim=unchanged)."""
    color = "green" if is_success else "dim"
    return f"[{color}]{status}[/{color}]"
