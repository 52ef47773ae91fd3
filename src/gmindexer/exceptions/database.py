import pathlib
from typing import Any

from gmindexer.exceptions.base import GmIndexerError


class BackupExists(GmIndexerError):
    """
    Raised by `gmindexer database backup` if a file exists at the target path.
    """

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path
        super().__init__(message=f"A backup at {path} already exists.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.path,)
