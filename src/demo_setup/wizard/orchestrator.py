"""
Demo Setup Orchestrator

Runs the setup steps strictly in order and holds the collaborators they share.
"""

import signal
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from rich.console import Console

from demo_setup.config import SetupConfig
from demo_setup.environment import EnvironmentProvider
from demo_setup.system import Browser, CommandRunner, GhAuthProbe
from demo_setup.wizard.logging_config import get_logger
from demo_setup.wizard.ui import SetupUI


logger = get_logger("orchestrator")


@dataclass
class StepDefinition:
    """Definition of a setup step."""
    name: str
    title: str
    description: str
    handler: Callable[["SetupOrchestrator"], bool]


@dataclass
class RunState:
    """In-memory record of a single run."""
    completed_steps: List[str] = field(default_factory=list)
    results: Dict[str, bool] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)


class SetupOrchestrator:
    """Orchestrates the demo workstation setup.

    Every collaborator can be injected so steps can run against fakes.
    There are no retries: an exception raised by a step ends the run.
    """

    def __init__(
        self,
        config: Optional[SetupConfig] = None,
        console: Optional[Console] = None,
        env: Optional[EnvironmentProvider] = None,
        runner: Optional[CommandRunner] = None,
        browser: Optional[Browser] = None,
        auth_probe: Optional[GhAuthProbe] = None,
        ui: Optional[SetupUI] = None,
    ):
        self.config = config or SetupConfig()
        self.console = console or (ui.console if ui else Console())
        self.ui = ui or SetupUI(self.console)
        self.env = env or EnvironmentProvider()
        self.runner = runner or CommandRunner()
        self.browser = browser or Browser()
        self.auth_probe = auth_probe or GhAuthProbe(
            self.runner, cli=self.config.cli_tool, host=self.config.cli_host
        )
        self.state = RunState()
        self.steps: List[StepDefinition] = []

    def _handle_interrupt(self, signum, frame):
        """Handle Ctrl+C by ending the run."""
        self.console.print("\n")
        self.ui.print_warning("Setup interrupted.")
        self.console.print("[cyan]Run 'demo-setup run' again to continue; finished steps are safe to repeat.[/cyan]")
        sys.exit(130)  # Standard exit code for SIGINT

    def add_step(
        self,
        name: str,
        title: str,
        description: str,
        handler: Callable[["SetupOrchestrator"], bool],
    ):
        """Add a step to the run."""
        self.steps.append(StepDefinition(
            name=name,
            title=title,
            description=description,
            handler=handler,
        ))

    def add_steps(self, definitions: Iterable[Dict[str, Any]]):
        """Add steps from a list of definition dicts."""
        for step in definitions:
            self.add_step(
                name=step["name"],
                title=step["title"],
                description=step["description"],
                handler=step["handler"],
            )

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.state.data.get(key, default)

    def set_data(self, key: str, value: Any):
        self.state.data[key] = value

    def run(self, show_header: bool = True) -> bool:
        """Run every registered step in order.

        Returns:
            True if every step reported success
        """
        previous_handler = signal.signal(signal.SIGINT, self._handle_interrupt)
        try:
            if show_header:
                self.ui.print_header()
            self.ui.set_total_steps(len(self.steps))

            for i, step in enumerate(self.steps):
                self.ui.print_step_header(i + 1, step.title, step.description)
                logger.debug("Starting step %s", step.name)

                passed = bool(step.handler(self))

                self.state.results[step.name] = passed
                self.state.completed_steps.append(step.name)
                logger.debug("Finished step %s (passed=%s)", step.name, passed)
        finally:
            signal.signal(signal.SIGINT, previous_handler)

        return all(self.state.results.values())
