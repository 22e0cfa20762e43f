"""
Demo Setup Steps

Individual step handlers, listed in the order they must run.
"""

from demo_setup.wizard.steps.web_auth import web_auth_step
from demo_setup.wizard.steps.package_manager import package_manager_step
from demo_setup.wizard.steps.tools import tools_step
from demo_setup.wizard.steps.cli_auth import cli_auth_step
from demo_setup.wizard.steps.pwa import pwa_step
from demo_setup.wizard.steps.extensions import extensions_step
from demo_setup.wizard.steps.theme import theme_step
from demo_setup.wizard.steps.demo_loader import demo_loader_step
from demo_setup.wizard.steps.verification import verification_step

# Step definitions for the setup orchestrator
SETUP_STEPS = [
    {
        "name": "web_auth",
        "title": "GitHub Sign-in",
        "description": "Sign in to GitHub in your browser",
        "handler": web_auth_step,
    },
    {
        "name": "package_manager",
        "title": "Package Manager",
        "description": "Make sure Chocolatey is installed",
        "handler": package_manager_step,
    },
    {
        "name": "tools",
        "title": "Tools",
        "description": "Install VS Code, VS Code Insiders, GitHub CLI and VLC",
        "handler": tools_step,
    },
    {
        "name": "cli_auth",
        "title": "GitHub CLI",
        "description": "Sign in the GitHub CLI and install its extensions",
        "handler": cli_auth_step,
    },
    {
        "name": "pwa",
        "title": "Web Apps",
        "description": "Install the demo sites as apps",
        "handler": pwa_step,
    },
    {
        "name": "extensions",
        "title": "Editor Extensions",
        "description": "Install extensions into both editors",
        "handler": extensions_step,
    },
    {
        "name": "theme",
        "title": "Editor Theme",
        "description": "Set the color theme in both editors",
        "handler": theme_step,
    },
    {
        "name": "demo_loader",
        "title": "Demo Loader",
        "description": "Write the demo loader script to your desktop",
        "handler": demo_loader_step,
    },
    {
        "name": "verification",
        "title": "Verification",
        "description": "Check that every tool is installed",
        "handler": verification_step,
    },
]

__all__ = [
    "web_auth_step",
    "package_manager_step",
    "tools_step",
    "cli_auth_step",
    "pwa_step",
    "extensions_step",
    "theme_step",
    "demo_loader_step",
    "verification_step",
    "SETUP_STEPS",
]
