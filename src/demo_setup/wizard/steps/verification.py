"""
Verification Step

Re-check that every installed tool is present and report a single verdict.
"""

from typing import TYPE_CHECKING, List, Tuple

from demo_setup.wizard.logging_config import get_logger
from demo_setup.wizard.steps.tools import is_editor_installed

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


logger = get_logger("steps.verification")

SUCCESS_MESSAGE = "All tools installed successfully. Your demo workstation is ready."
FAILURE_MESSAGE = "Some tools are missing. Open a new terminal and run 'demo-setup verify' to re-check."


def run_presence_checks(setup: "SetupOrchestrator") -> List[Tuple[str, bool]]:
    """Check both editors by path, then the media player and CLI by command."""
    checks = [
        (editor.name, is_editor_installed(editor, setup.env))
        for editor in setup.config.editors
    ]
    checks.append((setup.config.media_player, setup.runner.exists(setup.config.media_player)))
    checks.append((setup.config.cli_tool, setup.runner.exists(setup.config.cli_tool)))
    return checks


def verify_installation(setup: "SetupOrchestrator") -> bool:
    checks = run_presence_checks(setup)
    for name, present in checks:
        logger.debug("Presence check %s: %s", name, "ok" if present else "missing")
    return all(present for _, present in checks)


def verification_step(setup: "SetupOrchestrator") -> bool:
    """Print one success or one failure message, never an itemized list."""
    passed = verify_installation(setup)
    setup.set_data("verification_passed", passed)
    if passed:
        setup.ui.print_success(SUCCESS_MESSAGE)
    else:
        setup.ui.print_error(FAILURE_MESSAGE)
    return passed
