"""Core engine: extraction, comparison, command execution and the check runner."""
