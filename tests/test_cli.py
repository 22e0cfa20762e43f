"""Tests for the demo-setup CLI."""

import json
import subprocess
import sys

import pytest
import yaml
from click.testing import CliRunner


@pytest.fixture
def windows_env(monkeypatch, tmp_path):
    """Point every per-user directory into tmp_path."""
    home = tmp_path / "home"
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("APPDATA", str(home / "AppData" / "Roaming"))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData" / "Local"))
    monkeypatch.setenv("ProgramData", str(tmp_path / "ProgramData"))
    monkeypatch.setenv("ProgramFiles", str(tmp_path / "Program Files"))
    monkeypatch.delenv("DEMO_SETUP_CONFIG", raising=False)
    return home


class TestCLI:
    """Test CLI entry points."""

    def test_help(self):
        result = subprocess.run(
            [sys.executable, "-m", "demo_setup", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "run" in result.stdout
        assert "verify" in result.stdout
        assert "loader" in result.stdout

    def test_version(self):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output.lower()

    def test_run_help(self):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["run", "--help"])
        assert result.exit_code == 0
        assert "--config" in result.output
        assert "--verbose" in result.output


class TestShowConfig:
    """Test show-config."""

    def test_defaults(self, windows_env):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["show-config"])
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["color_theme"] == "GitHub Dark Default"
        assert len(data["editor_extensions"]) == 8

    def test_override(self, windows_env, tmp_path):
        from demo_setup.cli import main

        config_path = tmp_path / "demo.yaml"
        config_path.write_text("color_theme: Monokai\n")

        result = CliRunner().invoke(main, ["show-config", "--config", str(config_path)])
        assert result.exit_code == 0
        assert yaml.safe_load(result.output)["color_theme"] == "Monokai"

    def test_config_from_environment(self, windows_env, tmp_path, monkeypatch):
        from demo_setup.cli import main

        config_path = tmp_path / "demo.yaml"
        config_path.write_text("cli_tool: gh2\n")
        monkeypatch.setenv("DEMO_SETUP_CONFIG", str(config_path))

        result = CliRunner().invoke(main, ["show-config"])
        assert yaml.safe_load(result.output)["cli_tool"] == "gh2"

    def test_missing_config_exit_code(self, windows_env, tmp_path):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["show-config", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 10


class TestSingleStepCommands:
    """Test commands that run one step."""

    def test_loader_writes_to_desktop(self, windows_env):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["loader"])
        assert result.exit_code == 0

        loader = windows_env / "Desktop" / "demo-loader.ps1"
        assert loader.exists()
        assert "Start-Process" in loader.read_text()

    def test_theme_writes_settings(self, windows_env):
        from demo_setup.cli import main

        result = CliRunner().invoke(main, ["theme"])
        assert result.exit_code == 0

        settings = windows_env / "AppData" / "Roaming" / "Code" / "User" / "settings.json"
        assert json.loads(settings.read_text())["workbench.colorTheme"] == "GitHub Dark Default"

    def test_theme_malformed_settings_exit_code(self, windows_env):
        from demo_setup.cli import main

        settings = windows_env / "AppData" / "Roaming" / "Code" / "User" / "settings.json"
        settings.parent.mkdir(parents=True)
        settings.write_text("{ not json")

        result = CliRunner().invoke(main, ["theme"])
        assert result.exit_code == 16

    def test_verify_fails_when_nothing_installed(self, windows_env, monkeypatch):
        from demo_setup.cli import main

        monkeypatch.setattr("demo_setup.system.shutil.which", lambda name: None)
        result = CliRunner().invoke(main, ["verify"])
        assert result.exit_code == 1

    def test_verify_passes_when_everything_installed(self, windows_env, monkeypatch):
        from demo_setup.cli import main
        from demo_setup.config import SetupConfig

        local = windows_env / "AppData" / "Local"
        for editor in SetupConfig().editors:
            exe = local / editor.install_dir / editor.executable
            exe.parent.mkdir(parents=True, exist_ok=True)
            exe.touch()
        monkeypatch.setattr("demo_setup.system.shutil.which", lambda name: f"/usr/bin/{name}")

        result = CliRunner().invoke(main, ["verify"])
        assert result.exit_code == 0


class TestRunCommand:
    """Test the full setup command."""

    def test_failed_verification_still_exits_zero(self, windows_env, make_setup, monkeypatch):
        from demo_setup.cli import main
        from demo_setup.wizard.steps.verification import FAILURE_MESSAGE, verification_step

        setup = make_setup()

        def write_loader(s):
            s.set_data("demo_loader_path", "C:/Users/demo/Desktop/demo-loader.ps1")
            return True

        setup.add_step("demo_loader", "Demo Loader", "", write_loader)
        setup.add_step("verification", "Verification", "", verification_step)
        monkeypatch.setattr("demo_setup.cli._build_orchestrator", lambda config, step_names=None: setup)

        result = CliRunner().invoke(main, ["run"])

        assert result.exit_code == 0
        assert setup.get_data("verification_passed") is False
        output = setup.ui.output
        assert FAILURE_MESSAGE in output
        assert "Setup Finished" in output
        assert "Run C:/Users/demo/Desktop/demo-loader.ps1 before your next demo" in output
        assert "demo-setup verify" in output

    def test_passed_verification_has_no_verify_hint(self, windows_env, make_setup, monkeypatch):
        from demo_setup.cli import main

        setup = make_setup()

        def passed(s):
            s.set_data("verification_passed", True)
            return True

        setup.add_step("verification", "Verification", "", passed)
        monkeypatch.setattr("demo_setup.cli._build_orchestrator", lambda config, step_names=None: setup)

        result = CliRunner().invoke(main, ["run"])

        assert result.exit_code == 0
        assert "Setup Finished" in setup.ui.output
        assert "demo-setup verify" not in setup.ui.output

    def test_network_error_exit_code(self, windows_env, make_setup, monkeypatch):
        from demo_setup.cli import main
        from demo_setup.wizard.exceptions import NetworkError

        setup = make_setup()
        later = []

        def offline(s):
            raise NetworkError(
                "Failed to download the Chocolatey install script",
                endpoint="https://community.chocolatey.org/install.ps1",
            )

        setup.add_step("package_manager", "Package Manager", "", offline)
        setup.add_step("tools", "Tools", "", lambda s: later.append("tools") or True)
        monkeypatch.setattr("demo_setup.cli._build_orchestrator", lambda config, step_names=None: setup)

        result = CliRunner().invoke(main, ["run"])

        assert result.exit_code == 13
        assert "Failed to download the Chocolatey install script" in result.output
        assert later == []
        assert "Setup Finished" not in setup.ui.output
