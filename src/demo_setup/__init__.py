"""
Demo Setup: workstation provisioning for demo and training sessions

Installs the demo toolchain, configures the editors and writes a desktop
script that reopens everything for the next session.
"""

try:
    from importlib.metadata import version
    __version__ = version("demo-setup")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
