"""Version extraction — pull a version token out of unstructured command output.

The generic rule takes the *first* substring that looks like a version
(optional ``v``, then one to three dot-separated digit groups) anywhere in
the output.  Some tools print several version-like numbers, so a table of
per-tool strategies is consulted first; the first strategy whose matcher
accepts the command string decides the result.

    >>> extract_version("go version", "go version go1.22.3 linux/amd64")
    '1.22.3'
    >>> extract_version("rsync --version", "protocol version 29\\nrsync version 2.6.9")
    '2.6.9'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import NamedTuple

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"[vV]?\d+(?:\.\d+){0,2}", re.ASCII)


class ExtractionStrategy(NamedTuple):
    """A tool-specific extraction rule.

    ``matches`` is called with the command string; ``extract`` with the
    trimmed output, and returns ``""`` when no version is found.
    """

    name: str
    matches: Callable[[str], bool]
    extract: Callable[[str], str]


def scan_version(text: str) -> str:
    """Return the first version-like token in *text*, without a leading ``v``."""
    match = VERSION_PATTERN.search(text)
    if match is None:
        return ""
    return match.group(0).lstrip("vV")


def scan_labelled_line(label: str) -> Callable[[str], str]:
    """Build an extractor that only looks at the first line containing *label*.

    Lines without the label are ignored even when they hold numbers; if no
    line carries the label the result is empty.
    """

    def _extract(output: str) -> str:
        for line in output.split("\n"):
            if label in line:
                return scan_version(line)
        return ""

    return _extract


def command_contains(keyword: str) -> Callable[[str], bool]:
    """Build a matcher that accepts commands containing *keyword*."""

    def _matches(command: str) -> bool:
        return keyword in command

    return _matches


# openrsync prints "protocol version 29" before the real tool version.
EXTRACTION_STRATEGIES: list[ExtractionStrategy] = [
    ExtractionStrategy(
        name="rsync",
        matches=command_contains("rsync"),
        extract=scan_labelled_line("rsync version"),
    ),
]


def register_strategy(strategy: ExtractionStrategy) -> None:
    """Append a tool-specific strategy to the lookup table.

    Strategies are consulted in registration order; earlier entries win.
    """
    EXTRACTION_STRATEGIES.append(strategy)
    logger.debug("Registered extraction strategy: %s", strategy.name)


def select_strategy(command: str) -> ExtractionStrategy | None:
    """Return the first registered strategy matching *command*, if any."""
    for strategy in EXTRACTION_STRATEGIES:
        if strategy.matches(command):
            return strategy
    return None


def extract_version(command: str, output: str) -> str:
    """Extract the version token that represents the tool's version.

    Parameters
    ----------
    command:
        The command that produced *output*.  Only inspected to pick an
        extraction strategy; never executed here.
    output:
        Command output, already stripped of surrounding whitespace.

    Returns
    -------
    str
        Digits and dots only, or ``""`` when no version token was found.
    """
    strategy = select_strategy(command)
    if strategy is None:
        version = scan_version(output)
    else:
        logger.debug("Using %s extraction strategy for %r", strategy.name, command)
        version = strategy.extract(output)

    logger.debug("Extracted version %r from output of %r", version, command)
    return version
