"""Exceptions raised by the task store."""


class PomocliError(Exception):
    """Base class for pomocli errors."""


class CorruptStoreError(PomocliError):
    """The data file exists but could not be read back as a task list."""

    def __init__(self, path, reason: str):
        super().__init__(f"Unreadable task file {path}: {reason}")
        self.path = path
        self.reason = reason
