"""
External process helpers

Thin wrappers around subprocess, the default browser and the GitHub CLI's
auth commands. Steps only talk to the system through these.
"""

import shutil
import subprocess
import tempfile
import webbrowser
from pathlib import Path
from typing import List, Optional, Sequence, Union

from demo_setup.wizard.logging_config import get_logger


logger = get_logger("system")

Command = Sequence[Union[str, Path]]


class CommandRunner:
    """Runs external commands without inspecting their exit codes."""

    def exists(self, name: str) -> bool:
        """Check whether a command is on the execution path."""
        return shutil.which(name) is not None

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def run(self, args: Command, capture: bool = False) -> subprocess.CompletedProcess:
        """Run a command and wait for it.

        Args:
            args: Program and arguments
            capture: Capture stdout/stderr instead of passing the terminal through

        Returns:
            The completed process; a non-zero return code is not an error here
        """
        argv: List[str] = [str(arg) for arg in args]
        logger.debug("Running: %s", " ".join(argv))
        result = subprocess.run(argv, capture_output=capture, text=True)
        logger.debug("Exit code %s from %s", result.returncode, argv[0])
        return result

    def run_powershell(self, script: str, preamble: str = "") -> subprocess.CompletedProcess:
        """Run a PowerShell script from a temporary .ps1 file.

        The script is invoked as a whole file, so a leading ``param`` block
        stays a script-level block. ``preamble`` runs in the same session
        just before the script.
        """
        executable = shutil.which("powershell") or shutil.which("pwsh") or "powershell"
        logger.debug("Running PowerShell script (%d chars)", len(script))

        with tempfile.TemporaryDirectory(prefix="demo-setup-") as tmp_dir:
            script_path = Path(tmp_dir) / "script.ps1"
            # Windows PowerShell reads BOM-less scripts in the ANSI code page
            script_path.write_text(script, encoding="utf-8-sig")
            quoted = str(script_path).replace("'", "''")
            return subprocess.run(
                [
                    executable, "-NoProfile", "-NonInteractive",
                    "-ExecutionPolicy", "Bypass",
                    "-Command", f"{preamble}& '{quoted}'",
                ],
                text=True,
            )


class Browser:
    """Opens URLs in the default browser."""

    def open(self, url: str) -> None:
        logger.debug("Opening %s", url)
        webbrowser.open(url)


class GhAuthProbe:
    """Authentication status and login through the GitHub CLI."""

    def __init__(self, runner: CommandRunner, cli: str = "gh", host: str = "github.com"):
        self.runner = runner
        self.cli = cli
        self.host = host

    def is_authenticated(self) -> bool:
        result = self.runner.run([self.cli, "auth", "status", "--hostname", self.host], capture=True)
        return result.returncode == 0

    def login(self) -> None:
        """Start the interactive login; the CLI owns the prompts."""
        self.runner.run([self.cli, "auth", "login", "--hostname", self.host, "--web"])
