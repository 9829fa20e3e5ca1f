# src/kubedelta/cli/formatter.py
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from kubedelta.core.models import ChangeKind, DiffEntry, DocumentReport, ReportStatus


class DiffFormatter:
    """
    DiffFormatter: The visual side of the CLI.
    Renders document reports, per-path changes and the final summary.
    The console is injected so the core never touches terminal styling.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def print_header(self, version: str):
        self.console.print(Panel.fit(
            f"[bold green]kubedelta v{version}[/bold green]\n"
            "Semantic diff for multi-document YAML manifests",
            border_style="blue"
        ))

    def print_reports(self, reports: List[DocumentReport], left_label: str = "file 1", right_label: str = "file 2"):
        self.console.print("\nDifferences found between the YAML files:\n")
        for report in reports:
            if report.status is ReportStatus.COMPARED:
                self.console.print(Text(f"Comparing object {report.key}:", style="bold"))
                if not report.entries:
                    self.console.print(Text("  no differences", style="dim"))
                for entry in report.entries:
                    self.print_entry(entry)
            elif report.status is ReportStatus.MISSING_IN_RIGHT:
                self.console.print(Text(f"Object missing in {right_label}: {report.key}", style="yellow"))
            else:
                self.console.print(Text(f"Object missing in {left_label}: {report.key}", style="yellow"))
            self.console.print("---")

    def print_entry(self, entry: DiffEntry):
        """
        Prints a single change: a location line, then '-' (red) for the left
        value and '+' (green) for the right value.
        """
        self.console.print(f"Found difference on [{entry.path}]", markup=False)
        if entry.kind is not ChangeKind.ADDED:
            self.console.print(Text(self._line("-", entry.key, entry.before), style="red"))
        if entry.kind is not ChangeKind.REMOVED:
            self.console.print(Text(self._line("+", entry.key, entry.after), style="green"))

    def _line(self, sign: str, key: str, value: Optional[str]) -> str:
        value = "" if value is None else value
        if "\n" in value:
            # subtree renderings go below the key, indented
            value = "\n" + "\n".join(f"    {line}" for line in value.splitlines())
        elif value:
            value = f" {value}"

        if not key or key.startswith("["):
            return f"{sign}{value}"
        return f"{sign} {key}:{value}"

    def print_summary(self, summary: Dict[str, Any], left_label: str = "file 1", right_label: str = "file 2"):
        table = Table(
            title="KubeDelta Comparison Summary",
            caption=f"Generated {summary['summary_timestamp']}",
            show_header=True, header_style="bold magenta"
        )
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")

        table.add_row("Objects", str(summary["total_objects"]))
        table.add_row("Compared", str(summary["compared"]))
        table.add_row("Changed", str(summary["changed"]))
        table.add_row(f"Missing in {escape(left_label)}", str(summary["missing_in_left"]))
        table.add_row(f"Missing in {escape(right_label)}", str(summary["missing_in_right"]))
        table.add_row("[green]Added[/green]", str(summary["added"]))
        table.add_row("[red]Removed[/red]", str(summary["removed"]))
        table.add_row("[yellow]Modified[/yellow]", str(summary["modified"]))

        self.console.print(table)

    def print_error(self, message: str):
        self.console.print(Text.assemble(("Error: ", "bold red"), message))
