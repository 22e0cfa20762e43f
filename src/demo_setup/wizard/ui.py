"""
Demo Setup UI Components

Console output and blocking prompts for the setup run, using the rich library.
"""

import re
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel


# Regex patterns for secrets that may show up in CLI output
SECRET_REGEXES = [
    r'ghp_[a-zA-Z0-9]{36,}',  # GitHub PAT
    r'gho_[a-zA-Z0-9]{36,}',  # GitHub OAuth
    r'ghu_[a-zA-Z0-9]{36,}',  # GitHub user-to-server
    r'github_pat_[a-zA-Z0-9_]{22,}',  # GitHub fine-grained PAT
]


def mask_secrets(text: str, mask: str = "********") -> str:
    """Mask GitHub tokens in a string."""
    if not text:
        return text

    result = text
    for regex in SECRET_REGEXES:
        result = re.sub(regex, mask, result)
    return result


class SetupUI:
    """UI components for the demo setup run."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._total_steps = 0

    def print_header(self, title: str = "Demo Workstation Setup"):
        """Print the run header."""
        self.console.print()
        self.console.print(Panel(
            f"[bold blue]{title}[/bold blue]",
            border_style="blue",
            padding=(0, 2)
        ))
        self.console.print()

    def set_total_steps(self, total: int):
        """Set the step count shown in step headers."""
        self._total_steps = total

    def print_step_header(self, step_num: int, title: str, description: str = ""):
        """Print a step header with number and title."""
        self.console.print()
        self.console.print(f"[bold cyan]Step {step_num}/{self._total_steps}:[/bold cyan] [bold]{title}[/bold]")
        if description:
            self.console.print(f"[dim]{description}[/dim]")
        self.console.print()

    def print_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def print_skip(self, message: str):
        self.console.print(f"[dim]○ {message} (skipped)[/dim]")

    def confirm(self, prompt: str) -> bool:
        """Block until the user enters a line.

        The answer is not checked: any input, including an empty line,
        counts as acknowledged.
        """
        self.console.input(f"[bold yellow]?[/bold yellow] {prompt} ")
        return True

    def show_completion_panel(
        self,
        title: str,
        content: str,
        next_steps: List[str]
    ):
        """Show a completion panel with next steps."""
        self.console.print()
        self.console.print(Panel(
            f"[bold green]{title}[/bold green]\n\n{content}",
            border_style="green",
            padding=(1, 2)
        ))

        if next_steps:
            self.console.print()
            self.console.print("[bold]Next Steps:[/bold]")
            for i, step in enumerate(next_steps, 1):
                self.console.print(f"  {i}. {step}")
