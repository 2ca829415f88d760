"""Exception types raised by the configuration engine."""


class ConfigureError(Exception):
    """Base class for configuration errors."""


class ProjectRootNotFoundError(ConfigureError, FileNotFoundError):
    """Raised when the project root sentinel file cannot be found."""

    def __init__(self, filename: str, start_dir: str):
        super().__init__(f"Failed to find `{filename}` in '{start_dir}' or any of its parents")
        self.filename = filename
        self.start_dir = start_dir


class SigningConfigError(ConfigureError, ValueError):
    """Raised when an Android signing config is invalid."""
