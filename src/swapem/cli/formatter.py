# src/swapem/cli/formatter.py
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from swapem.core.errors import ResolutionError, SwapError, TemplateError

# Everything the formatter prints goes to stderr, stdout carries swapped text
console = Console(stderr=True)


class SwapFormatter:
    """
    SwapFormatter: The visual side of the CLI.
    Responsible for rendering failures and run summaries.
    """

    def display_error(self, error: Exception):
        """Renders a failure in a red panel titled after its kind."""
        if isinstance(error, TemplateError):
            title = "Invalid Template"
        elif isinstance(error, ResolutionError):
            title = "Unresolvable Swap Path"
        elif isinstance(error, SwapError):
            title = type(error).__name__
        else:
            title = "Error"

        body = f"[white]{escape(str(error))}[/white]"
        if isinstance(error, ResolutionError):
            body += f"\n\n[dim]Path:[/dim] [cyan]{escape(error.path)}[/cyan]"
            if error.segment is not None:
                body += f"\n[dim]Segment:[/dim] [cyan]{escape(error.segment)}[/cyan]"

        console.print(Panel(body, title=f"[bold red]{title}[/bold red]", border_style="red", expand=False))

    def print_summary(self, report: Dict[str, Any]):
        """
        Builds the summary table shown at the end of a verbose run.
        """
        table = Table(title="Swapem Run Report", show_header=True, header_style="bold magenta")
        table.add_column("Output", style="cyan")
        table.add_column("Chunks", justify="right")
        table.add_column("Directives", justify="right")
        table.add_column("Elapsed", justify="right")
        table.add_column("Result", justify="center")

        table.add_row(
            escape(str(report.get("output"))),
            str(report.get("chunks", 0)),
            str(report.get("directives", 0)),
            f"{report.get('elapsed', 0.0):.3f}s",
            "✅"
        )

        console.print(table)
