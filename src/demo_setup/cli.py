"""
Demo Setup Command Line Interface

Main entry point for the demo-setup CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click
from rich.console import Console

from demo_setup.config import SetupConfig, dump_config, get_default_config_path, load_config
from demo_setup.wizard.exceptions import SetupError, get_error_code

console = Console()


def _load(config_path: Optional[str]) -> SetupConfig:
    path = Path(config_path) if config_path else get_default_config_path()
    return load_config(path)


def _report_error(error: Exception) -> None:
    """Print an error and exit with its mapped code."""
    if isinstance(error, SetupError):
        console.print(f"[red]Error:[/red] {error.message}")
        if error.details:
            console.print(f"[dim]{error.details}[/dim]")
        if error.remediation:
            console.print(f"[yellow]To fix:[/yellow] {error.remediation}")
    else:
        console.print(f"[red]Error:[/red] {error}")
    sys.exit(get_error_code(error))


def _build_orchestrator(config: SetupConfig, step_names: Optional[Iterable[str]] = None):
    from demo_setup.wizard.orchestrator import SetupOrchestrator
    from demo_setup.wizard.steps import SETUP_STEPS

    wanted = set(step_names) if step_names is not None else None
    setup = SetupOrchestrator(config=config, console=console)
    setup.add_steps(
        step for step in SETUP_STEPS
        if wanted is None or step["name"] in wanted
    )
    return setup


config_option = click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    help="YAML file overriding the built-in sites, extensions and tools",
)


@click.group()
@click.version_option(package_name="demo-setup")
def main():
    """Demo Setup: provision a workstation for demos and training"""
    pass


@main.command()
@config_option
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write a debug log to this file")
def run(config_path: Optional[str], verbose: bool, log_file: Optional[str]):
    """Run the full setup.

    Steps run in a fixed order: browser sign-in, Chocolatey, tools,
    GitHub CLI sign-in and extensions, web apps, editor extensions,
    editor theme, demo loader and a final verification.

    Examples:
        demo-setup run
        demo-setup run --config demo.yaml --verbose
    """
    from demo_setup.wizard.logging_config import setup_logging

    setup_logging(
        level=logging.DEBUG if verbose else None,
        log_file=Path(log_file) if log_file else None,
    )

    try:
        config = _load(config_path)
        setup = _build_orchestrator(config)
        setup.run()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _report_error(e)

    next_steps = []
    loader_path = setup.get_data("demo_loader_path")
    if loader_path:
        next_steps.append(f"Run {loader_path} before your next demo")
    if not setup.get_data("verification_passed"):
        next_steps.append("Run 'demo-setup verify' after installing the missing tools")

    setup.ui.show_completion_panel(
        "Setup Finished",
        f"Editor theme: {config.color_theme}\nDemo sites: {len(config.demo_sites)}",
        next_steps,
    )


@main.command()
@config_option
def verify(config_path: Optional[str]):
    """Check that every demo tool is installed."""
    from demo_setup.wizard.logging_config import setup_logging
    from demo_setup.wizard.orchestrator import SetupOrchestrator
    from demo_setup.wizard.steps.verification import verification_step

    setup_logging()
    try:
        setup = SetupOrchestrator(config=_load(config_path), console=console)
        passed = verification_step(setup)
    except Exception as e:
        _report_error(e)
    sys.exit(0 if passed else 1)


@main.command()
@config_option
def loader(config_path: Optional[str]):
    """Regenerate the demo loader script on the desktop."""
    from demo_setup.wizard.logging_config import setup_logging

    setup_logging()
    try:
        _build_orchestrator(_load(config_path), ["demo_loader"]).run(show_header=False)
    except Exception as e:
        _report_error(e)


@main.command()
@config_option
def theme(config_path: Optional[str]):
    """Set the editor color theme in both editors."""
    from demo_setup.wizard.logging_config import setup_logging

    setup_logging()
    try:
        _build_orchestrator(_load(config_path), ["theme"]).run(show_header=False)
    except Exception as e:
        _report_error(e)


@main.command("show-config")
@config_option
def show_config(config_path: Optional[str]):
    """Print the effective configuration as YAML."""
    try:
        config = _load(config_path)
    except Exception as e:
        _report_error(e)
    click.echo(dump_config(config), nl=False)


if __name__ == "__main__":
    main()
