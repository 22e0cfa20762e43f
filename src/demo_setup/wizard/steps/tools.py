"""
Tools Step

Install the editors, the GitHub CLI and the media player with Chocolatey.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from demo_setup.config import EditorVariant
from demo_setup.environment import EnvironmentProvider
from demo_setup.wizard.logging_config import get_logger
from demo_setup.wizard.steps.package_manager import get_package_manager_path

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


logger = get_logger("steps.tools")


def get_editor_executable(editor: EditorVariant, env: EnvironmentProvider) -> Path:
    """Path of an editor's executable under the per-user install location."""
    return env.local_app_data / editor.install_dir / editor.executable


def is_editor_installed(editor: EditorVariant, env: EnvironmentProvider) -> bool:
    return get_editor_executable(editor, env).exists()


def install_package(setup: "SetupOrchestrator", package: str) -> None:
    """Install a package; the installer's exit code is not inspected."""
    choco = get_package_manager_path(setup)
    result = setup.runner.run([choco, "install", package, "-y"])
    logger.debug("choco install %s exited with %s", package, result.returncode)


def tools_step(setup: "SetupOrchestrator") -> bool:
    """Install each tool; every install is independent of the others."""
    config = setup.config

    for editor in config.editors:
        if is_editor_installed(editor, setup.env):
            setup.ui.print_success(f"{editor.name} already installed")
            continue
        setup.ui.print_info(f"Installing {editor.name}...")
        install_package(setup, editor.package)

    setup.ui.print_info("Installing GitHub CLI...")
    install_package(setup, config.cli_package)

    setup.ui.print_info("Installing VLC...")
    install_package(setup, config.media_package)

    return True
