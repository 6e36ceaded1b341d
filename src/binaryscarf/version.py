"""Application name and version."""

import platform

APP_NAME = "binaryscarf"
APP_VERSION_MAJOR = 0
APP_VERSION_MINOR = 3


def version() -> str:
    """Return the application version as a display string."""
    return (
        f"{APP_NAME} {APP_VERSION_MAJOR}.{APP_VERSION_MINOR} "
        f"(Python {platform.python_version()})."
    )
