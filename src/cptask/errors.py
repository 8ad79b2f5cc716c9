"""
Error Definitions

Every failure the CLI can report derives from CptaskError
"""

from pathlib import Path
from typing import Optional, Sequence


class CptaskError(Exception):
    """Base class for all errors surfaced to the command line"""


class TransportError(CptaskError):
    """Request/connection failure or non-success HTTP status"""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NoSamplesError(CptaskError):
    """The page contained no complete sample pair"""


class WorkspaceError(CptaskError):
    """Filesystem failure, annotated with the offending path"""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class CaseNotFoundError(CptaskError):
    """No candidate input file exists for the requested case"""

    def __init__(self, case: str, directory: Path):
        super().__init__(f"input for case '{case}' not found in {directory}")
        self.case = case
        self.directory = directory


class CommandError(CptaskError):
    """External process could not be spawned or exited unsuccessfully"""

    def __init__(self, message: str, command: Sequence[str], returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
