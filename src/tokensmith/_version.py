"""Single source of truth for the tokensmith version."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Installed distribution version, or a fallback when running from a bare checkout."""
    try:
        return _metadata_version("tokensmith")
    except PackageNotFoundError:
        return FALLBACK_VERSION
