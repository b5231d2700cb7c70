"""versioncheck: verify installed tool versions against a YAML manifest.

Each configured tool is probed with a shell command, a version token is
pulled out of the command output, and the token is compared against the
expected version. Any failure makes the process exit non-zero.
"""

__version__ = "0.1.0"
__description__ = "Check versions of installed software against a configuration file."

from versioncheck.core.comparator import versions_match
from versioncheck.core.extractor import extract_version
from versioncheck.core.runner import CheckRunner

__all__ = ["CheckRunner", "extract_version", "versions_match", "__version__"]
