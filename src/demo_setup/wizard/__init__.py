"""
Demo Setup Wizard

Step sequencing, console UI, logging and errors for the setup run.
Import SetupOrchestrator from demo_setup.wizard.orchestrator.
"""
