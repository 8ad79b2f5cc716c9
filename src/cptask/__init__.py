"""
cptask: AtCoder Contest Workspace Utilities

Fetches sample test cases from task pages, runs a binary against a sample,
and drives the test runner of a multi-binary contest workspace.
"""

__version__ = "0.1.0"

from .data import (
    SampleKind,
    SamplePair,
    SampleCollection,
    TestTarget,
    WriteReport,
)

from .config import Config

from .core import (
    parse_samples,
    require_samples,
    candidate_inputs,
    resolve_case,
    normalize_target,
    SampleWriter,
)

from .errors import (
    CptaskError,
    TransportError,
    NoSamplesError,
    WorkspaceError,
    CaseNotFoundError,
    CommandError,
)

__all__ = [
    # Version
    "__version__",
    # Data
    "SampleKind",
    "SamplePair",
    "SampleCollection",
    "TestTarget",
    "WriteReport",
    # Config
    "Config",
    # Core
    "parse_samples",
    "require_samples",
    "candidate_inputs",
    "resolve_case",
    "normalize_target",
    "SampleWriter",
    # Errors
    "CptaskError",
    "TransportError",
    "NoSamplesError",
    "WorkspaceError",
    "CaseNotFoundError",
    "CommandError",
]
