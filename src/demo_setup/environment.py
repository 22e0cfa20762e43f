"""
Per-user directory lookup

Wraps the platform environment variables the setup reads so tests can
substitute their own directories.
"""

import os
from pathlib import Path
from typing import Mapping, Optional


class EnvironmentProvider:
    """Resolves the per-user and system directories used during setup.

    Values come from the Windows environment variables when present and fall
    back to locations under the home directory otherwise.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None
    ):
        self._environ = os.environ if environ is None else environ
        self._home = home or Path.home()

    def _lookup(self, name: str, fallback: Path) -> Path:
        value = self._environ.get(name)
        return Path(value) if value else fallback

    @property
    def user_profile(self) -> Path:
        return self._lookup("USERPROFILE", self._home)

    @property
    def app_data(self) -> Path:
        return self._lookup("APPDATA", self.user_profile / "AppData" / "Roaming")

    @property
    def local_app_data(self) -> Path:
        return self._lookup("LOCALAPPDATA", self.user_profile / "AppData" / "Local")

    @property
    def program_data(self) -> Path:
        return self._lookup("ProgramData", Path("C:/ProgramData"))

    @property
    def program_files(self) -> Path:
        return self._lookup("ProgramFiles", Path("C:/Program Files"))

    @property
    def desktop(self) -> Path:
        return self.user_profile / "Desktop"

