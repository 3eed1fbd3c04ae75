"""Exceptions raised by dsym-upload."""


class DsymUploadError(Exception):
    """Base class for errors that abort a run."""


class ConfigurationError(DsymUploadError):
    """Raised when the invocation or the paths it names are unusable."""


class ToolNotFoundError(DsymUploadError):
    """Raised when a required external utility is not installed."""

    def __init__(self, tool: str, reason: str | None = None):
        self.tool = tool
        message = f"{tool} is not available"
        if reason:
            message = f"{message}; {reason}"
        super().__init__(message)


class ToolError(DsymUploadError):
    """Raised when an external utility exits with an error."""

    def __init__(self, tool: str, returncode: int, output: str = ""):
        self.tool = tool
        self.returncode = returncode
        self.output = output
        message = f"{tool} exited with status {returncode}"
        if output.strip():
            message = f"{message}: {output.strip()}"
        super().__init__(message)
