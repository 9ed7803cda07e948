"""Version management for codestamp."""

import re
from importlib import metadata
from pathlib import Path


def get_version() -> str:
    """
    Get the current version.

    Uses installed package metadata, falling back to pyproject.toml when
    running from a source checkout.

    Returns:
        str: Version string
    """
    try:
        return metadata.version("codestamp")
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text(encoding='utf-8')
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match:
            return match.group(1)

    return "unknown"


__version__ = get_version()
