"""
Case Resolver and Test Target Normalization
"""

from pathlib import Path
from typing import List, Optional

from ..data.models import TestTarget
from ..errors import CaseNotFoundError
from ..utils.logger import log_debug


TEST_SUFFIX = "_test"


def candidate_inputs(directory: Path, case: str) -> List[Path]:
    """
    List input files to probe for a case token, most specific first

    The literal "<case>.in" always comes first; a purely numeric token also
    yields its zero-padded 3-digit form ("7" -> "007.in").

    Args:
        directory: Sample directory of the binary
        case: Case token supplied by the user

    Returns:
        List[Path]: Candidate paths (may contain duplicates)
    """
    paths = [directory / f"{case}.in"]
    if case and case.isascii() and case.isdigit():
        paths.append(directory / f"{int(case):03d}.in")
    return paths


def resolve_case(directory: Path, case: str) -> Path:
    """
    Return the first existing candidate input file for a case token

    Raises:
        CaseNotFoundError: If no candidate exists
    """
    for path in candidate_inputs(directory, case):
        log_debug(f"Probing {path}")
        if path.exists():
            return path
    raise CaseNotFoundError(case, directory)


def normalize_target(target: str) -> TestTarget:
    """
    Derive the test binary and filter from a task target

    "C" and "c_test" both give binary "c_test" and filter "c_all_cases".

    Args:
        target: Task letter or test binary name

    Returns:
        TestTarget: Normalized slug and test binary name
    """
    normalized = target.lower()
    if normalized.endswith(TEST_SUFFIX):
        return TestTarget(slug=normalized[:-len(TEST_SUFFIX)], test_name=normalized)
    return TestTarget(slug=normalized, test_name=f"{normalized}{TEST_SUFFIX}")


def normalize_optional_target(target: Optional[str]) -> Optional[TestTarget]:
    if not target:
        return None
    return normalize_target(target)
