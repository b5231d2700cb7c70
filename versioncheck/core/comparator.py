"""Version comparison — strict dotted equality.

Components are compared as text, position by position, and both versions
must have the same number of components.  ``1.22`` therefore does not
satisfy ``1.22.3``, and ``02`` is not ``2``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def versions_match(extracted: str, expected: str) -> bool:
    """Return True when *extracted* equals *expected* component by component."""
    extracted_parts = extracted.split(".")
    expected_parts = expected.split(".")

    for actual, wanted in zip(extracted_parts, expected_parts):
        if actual != wanted:
            logger.debug(
                "Component mismatch %r != %r (%s vs %s)",
                actual, wanted, extracted, expected,
            )
            return False

    # A matching prefix is not enough
    return len(extracted_parts) == len(expected_parts)
