"""
Demo Loader Step

Write a PowerShell script to the desktop that reopens the demo sites,
both editors and the media folder in one go.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List

from demo_setup.config import SetupConfig
from demo_setup.environment import EnvironmentProvider
from demo_setup.wizard.steps.tools import get_editor_executable

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


def ps_quote(value: str) -> str:
    """Quote a value as a PowerShell single-quoted string."""
    return "'" + value.replace("'", "''") + "'"


def start_process(target: str, argument: str = "") -> str:
    line = f"Start-Process -FilePath {ps_quote(target)}"
    if argument:
        # Inner double quotes keep paths with spaces as a single argument
        line += " -ArgumentList " + ps_quote('"' + argument + '"')
    return line


def build_demo_loader(config: SetupConfig, env: EnvironmentProvider) -> str:
    """Compose the demo loader script.

    Order: every demo site (general first, then PWA sites), each editor,
    then the media player on the media folder.
    """
    lines: List[str] = [
        "# Demo loader generated by demo-setup",
        "# Reopens the demo sites, editors and media folder.",
        "",
    ]
    for url in config.demo_sites:
        lines.append(start_process(url))
    for editor in config.editors:
        lines.append(start_process(str(get_editor_executable(editor, env))))

    media_player = env.program_files / config.media_player_path
    media_folder = env.user_profile / config.media_folder
    lines.append(start_process(str(media_player), str(media_folder)))

    return "\n".join(lines) + "\n"


def get_demo_loader_path(config: SetupConfig, env: EnvironmentProvider) -> Path:
    return env.desktop / config.demo_loader_name


def write_demo_loader(config: SetupConfig, env: EnvironmentProvider) -> Path:
    """Write the loader to the desktop, replacing any previous one."""
    path = get_demo_loader_path(config, env)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_demo_loader(config, env), encoding="utf-8")
    return path


def demo_loader_step(setup: "SetupOrchestrator") -> bool:
    path = write_demo_loader(setup.config, setup.env)
    setup.set_data("demo_loader_path", str(path))
    setup.ui.print_success(f"Demo loader written to {path}")
    return True
