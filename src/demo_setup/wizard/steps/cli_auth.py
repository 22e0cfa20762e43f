"""
GitHub CLI Step

Sign the GitHub CLI in and install its extensions.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


def ensure_cli_authenticated(setup: "SetupOrchestrator") -> bool:
    """Log in if needed, then report the status as seen afterwards.

    The status is probed twice, before and after the login attempt. The
    second answer is the one that counts, even when the first was already
    positive.
    """
    probe = setup.auth_probe
    if not probe.is_authenticated():
        setup.ui.print_info("GitHub CLI is not signed in. Starting login...")
        probe.login()
    return probe.is_authenticated()


def install_cli_extensions(setup: "SetupOrchestrator") -> None:
    for extension in setup.config.cli_extensions:
        setup.ui.print_info(f"Installing gh extension {extension}")
        setup.runner.run([setup.config.cli_tool, "extension", "install", extension])


def cli_auth_step(setup: "SetupOrchestrator") -> bool:
    """Authenticate the CLI and install extensions when that worked."""
    if not setup.runner.exists(setup.config.cli_tool):
        setup.ui.print_warning(
            f"'{setup.config.cli_tool}' not found on PATH. "
            "Open a new terminal after setup and run 'demo-setup run' again."
        )
        return True

    if ensure_cli_authenticated(setup):
        setup.ui.print_success("GitHub CLI signed in")
        install_cli_extensions(setup)
    else:
        setup.ui.print_error("GitHub CLI is still not signed in.")
        setup.ui.print_info(
            f"Please run '{setup.config.cli_tool} auth login' manually, "
            "then install the extensions with 'gh extension install'."
        )
    return True
