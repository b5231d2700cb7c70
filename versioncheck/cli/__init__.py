"""versioncheck CLI — Typer-based command-line interface.

Provides the single ``versioncheck`` command. All output uses Rich.
"""
