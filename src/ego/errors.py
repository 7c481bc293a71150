"""
Error types raised by the line counter and the session manager.

Every failure a user can act on derives from ``EgoError``; the CLI turns
those into a message and a non-zero exit code.
"""


class EgoError(Exception):
    """Base class for user-facing ego errors."""

    pass


class InvalidPath(EgoError):
    """The supplied project path does not exist or is not a readable directory."""

    def __init__(self, path, reason: str = "not an existing directory"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid project path '{self.path}': {reason}")


class SessionAlreadyActive(EgoError):
    """``begin_session`` was called while a session record exists."""

    def __init__(self, project_path: str = ""):
        self.project_path = project_path
        message = "A session is already active"
        if project_path:
            message += f" for '{project_path}'"
        message += ". Run 'ego end' to finish it or 'ego discard' to drop it."
        super().__init__(message)


class NoActiveSession(EgoError):
    """``end_session`` or ``discard_session`` was called with no record present."""

    def __init__(self):
        super().__init__("No active session found. Run 'ego start <dir>' first.")


class ProjectPathUnavailable(EgoError):
    """The stored project directory can not be scanned at end time."""

    def __init__(self, path: str, reason: str = "directory is missing"):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Project directory '{path}' is unavailable ({reason}). "
            "The session was kept; restore the directory and retry, "
            "or run 'ego discard'."
        )


class CorruptSessionRecord(EgoError):
    """The persisted session record exists but can not be parsed."""

    def __init__(self, path, reason: str, hint: str = "Run 'ego discard' to remove it."):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Session record at '{self.path}' is unreadable ({reason}). {hint}")
