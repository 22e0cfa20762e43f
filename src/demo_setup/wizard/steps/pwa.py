"""
PWA Step

Walk the user through installing each web app from the browser.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


def pwa_step(setup: "SetupOrchestrator") -> bool:
    """Open each PWA site and wait for the user before the next one."""
    for url in setup.config.pwa_sites:
        setup.browser.open(url)
        setup.ui.confirm(
            f"Install {url} as an app (browser menu > Apps > Install this site as an app), "
            "then press Enter..."
        )
    return True
