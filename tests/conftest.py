"""Shared fakes for demo setup tests."""

import io
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

import pytest
from rich.console import Console

from demo_setup.config import SetupConfig
from demo_setup.environment import EnvironmentProvider
from demo_setup.wizard.orchestrator import SetupOrchestrator
from demo_setup.wizard.ui import SetupUI


class FakeRunner:
    """Command runner that records calls instead of running anything."""

    def __init__(self, events: List[tuple], commands: Iterable[str] = (), returncode: int = 0):
        self.events = events
        self.commands = set(commands)
        self.returncode = returncode
        self.calls: List[List[str]] = []
        self.scripts: List[str] = []
        self.preambles: List[str] = []

    def exists(self, name: str) -> bool:
        return name in self.commands

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.commands else None

    def run(self, args, capture: bool = False) -> subprocess.CompletedProcess:
        argv = [str(arg) for arg in args]
        self.calls.append(argv)
        self.events.append(("run", argv))
        return subprocess.CompletedProcess(argv, self.returncode)

    def run_powershell(self, script: str, preamble: str = "") -> subprocess.CompletedProcess:
        self.scripts.append(script)
        self.preambles.append(preamble)
        self.events.append(("powershell", script))
        return subprocess.CompletedProcess(["powershell"], self.returncode)


class FakeBrowser:
    def __init__(self, events: List[tuple]):
        self.events = events
        self.opened: List[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)
        self.events.append(("open", url))


class FakeAuthProbe:
    """Answers is_authenticated() from a fixed sequence."""

    def __init__(self, events: List[tuple], answers: Iterable[bool]):
        self.events = events
        self.answers = list(answers)
        self.status_calls = 0
        self.login_calls = 0

    def is_authenticated(self) -> bool:
        answer = self.answers[min(self.status_calls, len(self.answers) - 1)]
        self.status_calls += 1
        self.events.append(("auth_status", answer))
        return answer

    def login(self) -> None:
        self.login_calls += 1
        self.events.append(("login", None))


class FakeUI(SetupUI):
    """UI that records prompts instead of reading stdin."""

    def __init__(self, events: List[tuple]):
        super().__init__(Console(file=io.StringIO(), width=120))
        self.events = events
        self.prompts: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        self.events.append(("confirm", prompt))
        return True

    @property
    def output(self) -> str:
        return self.console.file.getvalue()


def make_env(root: Path) -> EnvironmentProvider:
    home = root / "home"
    return EnvironmentProvider(
        environ={
            "USERPROFILE": str(home),
            "APPDATA": str(home / "AppData" / "Roaming"),
            "LOCALAPPDATA": str(home / "AppData" / "Local"),
            "ProgramData": str(root / "ProgramData"),
            "ProgramFiles": str(root / "Program Files"),
        },
        home=home,
    )


def install_editor(setup: SetupOrchestrator, index: int) -> Path:
    """Create the executable file for one editor variant."""
    editor = setup.config.editors[index]
    exe = setup.env.local_app_data / editor.install_dir / editor.executable
    exe.parent.mkdir(parents=True, exist_ok=True)
    exe.touch()
    return exe


@pytest.fixture
def events() -> List[tuple]:
    return []


@pytest.fixture
def make_setup(tmp_path, events):
    """Build an orchestrator wired to fakes."""

    def _make(
        config: Optional[SetupConfig] = None,
        commands: Iterable[str] = (),
        auth_answers: Iterable[bool] = (True,),
        returncode: int = 0,
    ) -> SetupOrchestrator:
        return SetupOrchestrator(
            config=config or SetupConfig(),
            env=make_env(tmp_path),
            runner=FakeRunner(events, commands, returncode),
            browser=FakeBrowser(events),
            auth_probe=FakeAuthProbe(events, auth_answers),
            ui=FakeUI(events),
        )

    return _make
