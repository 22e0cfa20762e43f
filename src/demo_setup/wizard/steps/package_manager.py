"""
Package Manager Step

Make sure Chocolatey is installed, bootstrapping it from the official
install script when it is missing.
"""

from typing import TYPE_CHECKING

import requests

from demo_setup.wizard.exceptions import BootstrapError, NetworkError
from demo_setup.wizard.logging_config import get_logger

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


logger = get_logger("steps.package_manager")

# Runs before the downloaded script; the policy change only lasts for this process
BOOTSTRAP_PREAMBLE = (
    "Set-ExecutionPolicy Bypass -Scope Process -Force\n"
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072\n"
)


def fetch_install_script(url: str, timeout: float = 30.0) -> str:
    """Download the package manager install script.

    Raises:
        NetworkError: If the download fails or returns an error status
    """
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise NetworkError(
            "Failed to download the Chocolatey install script",
            endpoint=url,
            details=str(e)
        )
    return resp.text


def get_package_manager_path(setup: "SetupOrchestrator") -> str:
    """Resolve the package manager executable.

    A fresh bootstrap does not update PATH for the running process, so fall
    back to the default Chocolatey location.
    """
    found = setup.runner.which(setup.config.package_manager)
    if found:
        return found
    return str(setup.env.program_data / "chocolatey" / "bin" / f"{setup.config.package_manager}.exe")


def bootstrap_package_manager(setup: "SetupOrchestrator") -> bool:
    """Install the package manager if it is missing.

    Returns:
        True if an install was performed, False if it was already present
    """
    if setup.runner.exists(setup.config.package_manager):
        return False

    script = fetch_install_script(
        setup.config.package_manager_install_url,
        timeout=setup.config.request_timeout
    )
    logger.info("Running Chocolatey install script from %s", setup.config.package_manager_install_url)
    result = setup.runner.run_powershell(script, preamble=BOOTSTRAP_PREAMBLE)
    if result.returncode != 0:
        raise BootstrapError(
            "The Chocolatey install script failed",
            exit_code=result.returncode,
            details=f"PowerShell exited with code {result.returncode}"
        )
    return True


def package_manager_step(setup: "SetupOrchestrator") -> bool:
    """Ensure the system package manager is present."""
    if bootstrap_package_manager(setup):
        setup.ui.print_success("Chocolatey installed")
    else:
        setup.ui.print_success("Chocolatey already installed")
    return True
