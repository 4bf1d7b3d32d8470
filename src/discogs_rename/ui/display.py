"""
Display management for the Discogs Rename CLI with Rich components.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box

from ..models.rename import RenamePlan


class DisplayManager:
    """Manages terminal output for rename runs using Rich."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def display_rename_plan(self, plan: RenamePlan):
        """Display the planned renames in a table."""
        if not plan.operations:
            self.console.print("[bold red]✗[/bold red] Nothing to rename.")
            return
        
        title = "Planned renames (dry run)" if plan.dry_run else "Renames"
        table = Table(title=title, box=box.ROUNDED, show_lines=False)
        table.add_column("#", style="bold white", justify="right")
        table.add_column("File", style="dim")
        table.add_column("New name", style="bold cyan")
        
        for number, operation in enumerate(plan.operations, start=1):
            table.add_row(str(number), str(operation.source), operation.target.name)
        
        self.console.print(table)
    
    def display_summary(self, plan: RenamePlan):
        """Display the outcome of a rename run."""
        if plan.dry_run:
            self.console.print(f"[yellow]⚠[/yellow] Dry run: {len(plan)} file(s) would be renamed.")
        else:
            self.console.print(f"[bold green]✓[/bold green] Renamed {len(plan)} file(s).")
    
    def display_error(self, message: str):
        """Display an error message."""
        self.console.print(f"[bold red]✗[/bold red] {message}")
    
    def display_warning(self, message: str):
        """Display a warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")
