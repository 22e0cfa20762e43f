"""
Web Sign-in Step

Open the login page and wait until the user says they are signed in.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


def web_auth_step(setup: "SetupOrchestrator") -> bool:
    """Open the login page in the browser and block on confirmation."""
    setup.browser.open(setup.config.login_url)
    setup.ui.print_info(f"Opened {setup.config.login_url} in your browser.")
    setup.ui.confirm("Sign in, then press Enter to continue...")
    return True
