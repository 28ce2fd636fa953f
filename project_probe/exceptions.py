"""Custom exceptions for project_probe."""


class ProbeError(Exception):
    """Base exception for all project_probe errors."""


class InvalidPatternError(ProbeError, ValueError):
    """Raised when an ignore rule is structurally empty (blank, lone ``!`` or ``/``)."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(f"Invalid ignore pattern: {rule!r}")


class ProbeIOError(ProbeError, OSError):
    """Raised when a directory, file or template resource cannot be read."""


class ProjectNotFoundError(ProbeIOError, FileNotFoundError):
    """Raised when the project root does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory {path} cannot be found")


class TemplateNotFoundError(ProbeIOError):
    """Raised when no built-in ignore template exists for a language."""


class NotParsedError(ProbeError):
    """Raised when a project query runs before ``Project.parse()`` succeeded."""
