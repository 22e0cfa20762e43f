"""
Editor Theme Step

Pin the color theme in each editor variant's user settings.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from demo_setup.config import THEME_SETTING_KEY, EditorVariant
from demo_setup.environment import EnvironmentProvider
from demo_setup.wizard.exceptions import SettingsError
from demo_setup.wizard.logging_config import get_logger

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


logger = get_logger("steps.theme")


def get_settings_path(editor: EditorVariant, env: EnvironmentProvider) -> Path:
    return env.app_data / editor.settings_dir / "User" / "settings.json"


def read_settings(settings_path: Path) -> Dict[str, Any]:
    """Parse a settings file; an empty file is an empty document.

    A leading UTF-8 byte order mark is accepted.

    Raises:
        SettingsError: If the content is not UTF-8 or not a JSON object
    """
    try:
        content = settings_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise SettingsError(
            f"{settings_path} is not valid UTF-8",
            settings_path=str(settings_path),
            details=str(e)
        )
    if not content.strip():
        return {}

    try:
        settings = json.loads(content)
    except json.JSONDecodeError as e:
        raise SettingsError(
            f"Could not parse {settings_path}",
            settings_path=str(settings_path),
            details=str(e)
        )

    if not isinstance(settings, dict):
        raise SettingsError(
            f"{settings_path} does not contain a JSON object",
            settings_path=str(settings_path)
        )
    return settings


def apply_theme(settings_path: Path, theme: str) -> Dict[str, Any]:
    """Set the color theme in a settings file, creating it if needed.

    The whole document is rewritten, so comments and formatting in the
    original file are not kept.

    Returns:
        The settings as written
    """
    if not settings_path.exists():
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.touch()
        logger.debug("Created empty settings file %s", settings_path)

    settings = read_settings(settings_path)
    settings[THEME_SETTING_KEY] = theme
    settings_path.write_text(json.dumps(settings, indent=4) + "\n", encoding="utf-8")
    return settings


def theme_step(setup: "SetupOrchestrator") -> bool:
    for editor in setup.config.editors:
        settings_path = get_settings_path(editor, setup.env)
        apply_theme(settings_path, setup.config.color_theme)
        setup.ui.print_success(f"{editor.name} theme set to '{setup.config.color_theme}'")
    return True
