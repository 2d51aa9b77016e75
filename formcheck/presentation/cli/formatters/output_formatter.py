"""
Output formatter for CLI commands.

This module provides consistent formatting for CLI output: rich tables
and panels for terminals, JSON for scripts.
"""

from typing import Any, Dict, List, Optional, Union
import json
from tabulate import tabulate
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text


class OutputFormatter:
    """
    Formatter for CLI command output.

    With ``use_rich`` disabled every method returns plain strings.
    """

    def __init__(self, use_rich: bool = True, console: Optional[Console] = None):
        """
        Initialize the formatter.

        Args:
            use_rich: Whether to use rich formatting
            console: Optional console to print to
        """
        self.use_rich = use_rich
        self.console = console or (Console() if use_rich else None)

    def format_errors(
        self,
        errors: Dict[str, str],
        title: Optional[str] = None
    ) -> Union[Table, str]:
        """
        Format an error report as a two-column table.

        Args:
            errors: Message per field
            title: Optional table title

        Returns:
            Union[Table, str]: Formatted table
        """
        if self.use_rich:
            table = Table(title=title) if title else Table()
            table.add_column("Field", style="bold")
            table.add_column("Error", style="red")
            for field, message in errors.items():
                table.add_row(field, message)
            return table

        table = tabulate(
            list(errors.items()),
            headers=["Field", "Error"],
            tablefmt="grid"
        )
        return f"{title}\n{table}" if title else table

    def format_list(self, items: List[str], title: Optional[str] = None) -> Union[Table, str]:
        """
        Format a list of names.

        Args:
            items: Items to list
            title: Optional title

        Returns:
            Union[Table, str]: Formatted list
        """
        if self.use_rich:
            table = Table(title=title) if title else Table()
            table.add_column("Name")
            for item in items:
                table.add_row(item)
            return table
        lines = [title] if title else []
        lines.extend(items)
        return "\n".join(lines)

    def format_json(
        self,
        data: Union[Dict[str, Any], List[Any]],
        pretty: bool = True
    ) -> str:
        """
        Format data as JSON.

        Args:
            data: Data to format
            pretty: Whether to pretty print

        Returns:
            str: Formatted JSON
        """
        if pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def format_error(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[Panel, str]:
        """
        Format error message.

        Args:
            message: Error message
            details: Optional error details

        Returns:
            Union[Panel, str]: Formatted error
        """
        if self.use_rich:
            error_text = Text(message, style="bold red")
            if details:
                error_text.append("\n" + details, style="red")
            return Panel(error_text, title="Error", border_style="red")
        if details:
            return f"Error: {message}\n{details}"
        return f"Error: {message}"

    def format_success(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[Panel, str]:
        """
        Format success message.

        Args:
            message: Success message
            details: Optional success details

        Returns:
            Union[Panel, str]: Formatted success message
        """
        if self.use_rich:
            success_text = Text(message, style="bold green")
            if details:
                success_text.append("\n" + details, style="green")
            return Panel(success_text, title="Success", border_style="green")
        if details:
            return f"Success: {message}\n{details}"
        return f"Success: {message}"

    def print(
        self,
        content: Any,
        style: Optional[str] = None
    ) -> None:
        """
        Print content with optional styling.

        Args:
            content: Content to print
            style: Optional style
        """
        if self.use_rich:
            if style:
                self.console.print(content, style=style)
            else:
                self.console.print(content)
        else:
            print(content)
