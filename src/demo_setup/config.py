"""
Demo Setup Configuration

Built-in defaults for every site, extension and tool the setup touches,
with optional overrides from a YAML file.
"""

import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from demo_setup.wizard.exceptions import ConfigError


# Settings key that selects the editor color theme
THEME_SETTING_KEY = "workbench.colorTheme"

# Environment variable pointing at a default config file
CONFIG_ENV_VAR = "DEMO_SETUP_CONFIG"


@dataclass(frozen=True)
class EditorVariant:
    """An installable editor build and where it lives on disk."""
    name: str
    package: str
    install_dir: str  # relative to LOCALAPPDATA
    executable: str
    cli: str
    settings_dir: str  # relative to APPDATA

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_EDITORS = (
    EditorVariant(
        name="VS Code",
        package="vscode",
        install_dir="Programs/Microsoft VS Code",
        executable="Code.exe",
        cli="code",
        settings_dir="Code",
    ),
    EditorVariant(
        name="VS Code Insiders",
        package="vscode-insiders",
        install_dir="Programs/Microsoft VS Code Insiders",
        executable="Code - Insiders.exe",
        cli="code-insiders",
        settings_dir="Code - Insiders",
    ),
)

DEFAULT_EDITOR_EXTENSIONS = (
    "GitHub.copilot",
    "GitHub.copilot-chat",
    "GitHub.vscode-pull-request-github",
    "GitHub.github-vscode-theme",
    "GitHub.vscode-github-actions",
    "ms-vscode.remote-repositories",
    "ms-python.python",
    "ms-vsliveshare.vsliveshare",
)


@dataclass(frozen=True)
class SetupConfig:
    """Immutable configuration shared by every setup step."""
    login_url: str = "https://github.com/login"
    package_manager: str = "choco"
    package_manager_install_url: str = "https://community.chocolatey.org/install.ps1"
    editors: Tuple[EditorVariant, ...] = DEFAULT_EDITORS
    cli_tool: str = "gh"
    cli_package: str = "gh"
    cli_host: str = "github.com"
    cli_extensions: Tuple[str, ...] = ("github/gh-copilot",)
    media_player: str = "vlc"
    media_package: str = "vlc"
    media_player_path: str = "VideoLAN/VLC/vlc.exe"  # relative to ProgramFiles
    media_folder: str = "Videos/Demo"  # relative to the user profile
    general_sites: Tuple[str, ...] = ("https://github.com",)
    pwa_sites: Tuple[str, ...] = ("https://github.com/copilot", "https://vscode.dev")
    editor_extensions: Tuple[str, ...] = DEFAULT_EDITOR_EXTENSIONS
    color_theme: str = "GitHub Dark Default"
    demo_loader_name: str = "demo-loader.ps1"
    request_timeout: float = 30.0

    @property
    def demo_sites(self) -> Tuple[str, ...]:
        """General demo sites followed by the PWA sites."""
        return self.general_sites + self.pwa_sites

    def to_dict(self) -> dict:
        data = asdict(self)
        # asdict turns tuples of dataclasses into tuples of dicts
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in data.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SetupConfig":
        """Build a config from defaults overridden by ``data``."""
        known = {f.name: f for f in fields(cls)}
        overrides: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                raise ConfigError(f"Unknown configuration key: {key}", config_key=key)

            if key == "editors":
                overrides[key] = _parse_editors(value)
            elif isinstance(known[key].default, tuple):
                overrides[key] = _parse_string_list(key, value)
            elif isinstance(known[key].default, float):
                if not isinstance(value, (int, float)) or isinstance(value, bool):
                    raise ConfigError(f"'{key}' must be a number", config_key=key)
                if value <= 0:
                    raise ConfigError(f"'{key}' must be greater than zero", config_key=key)
                overrides[key] = float(value)
            else:
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError(f"'{key}' must be a non-empty string", config_key=key)
                overrides[key] = value

        return cls(**overrides)


def _parse_string_list(key: str, value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings", config_key=key)
    return tuple(value)


def _parse_editors(value: Any) -> Tuple[EditorVariant, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError("'editors' must be a non-empty list", config_key="editors")

    editors = []
    required = [f.name for f in fields(EditorVariant)]
    for entry in value:
        if not isinstance(entry, dict):
            raise ConfigError("Each editor must be a mapping", config_key="editors")
        missing = [name for name in required if not entry.get(name)]
        if missing:
            raise ConfigError(
                f"Editor entry is missing: {', '.join(missing)}",
                config_key="editors"
            )
        unknown = set(entry) - set(required)
        if unknown:
            raise ConfigError(
                f"Unknown editor keys: {', '.join(sorted(unknown))}",
                config_key="editors"
            )
        editors.append(EditorVariant(**{name: str(entry[name]) for name in required}))
    return tuple(editors)


def get_default_config_path() -> Optional[Path]:
    """Get the config path from the environment, if set."""
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None


def load_config(path: Optional[Path] = None) -> SetupConfig:
    """Load the setup configuration.

    Args:
        path: Optional YAML file whose top-level keys override the defaults

    Returns:
        The effective configuration

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    if path is None:
        return SetupConfig()

    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}",
            remediation="Pass an existing file with --config or unset DEMO_SETUP_CONFIG"
        )

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}", details=str(e))

    if data is None:
        return SetupConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return SetupConfig.from_dict(data)


def dump_config(config: SetupConfig) -> str:
    """Render the configuration as YAML."""
    return yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
