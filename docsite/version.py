"""Version management for docsite."""

from importlib.metadata import PackageNotFoundError, version

# Base version (update manually at milestones)
__version_base__ = "0.1"


def get_version() -> str:
    """Get the installed distribution version, or the base version from a checkout."""
    try:
        return version("docsite")
    except PackageNotFoundError:
        return f"{__version_base__}.0"


__version__ = get_version()
