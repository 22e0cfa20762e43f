"""
Editor Extensions Step

Install the demo extensions into every editor variant.
"""

from typing import TYPE_CHECKING

from demo_setup.config import EditorVariant

if TYPE_CHECKING:
    from demo_setup.wizard.orchestrator import SetupOrchestrator


def get_editor_cli(setup: "SetupOrchestrator", editor: EditorVariant) -> str:
    """Resolve an editor's command line launcher.

    Falls back to the bin/ shim in the install directory when the editor was
    installed during this run and PATH is stale.
    """
    found = setup.runner.which(editor.cli)
    if found:
        return found
    return str(setup.env.local_app_data / editor.install_dir / "bin" / f"{editor.cli}.cmd")


def extensions_step(setup: "SetupOrchestrator") -> bool:
    for editor in setup.config.editors:
        cli = get_editor_cli(setup, editor)
        setup.ui.print_info(f"Installing extensions into {editor.name}")
        for extension in setup.config.editor_extensions:
            setup.runner.run([cli, "--install-extension", extension])
    return True
