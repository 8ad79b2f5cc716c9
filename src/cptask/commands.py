"""
Command Drivers

Glue between the CLI, the sample pipeline and the external collaborators
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .clients.atcoder_client import AtCoderClient
from .clients.cargo_client import CargoClient
from .config.base import Config
from .core.extractor import require_samples
from .core.resolver import normalize_optional_target, resolve_case
from .core.writer import SampleWriter
from .data.models import WriteReport
from .errors import CptaskError, WorkspaceError
from .utils.helpers import default_contest, find_project_root, package_name, rel_path
from .utils.logger import log_debug, log_info


def resolve_identifiers(
    identifiers: Sequence[str],
    cwd: Optional[Path] = None,
    fallback_contest: str = "contest"
) -> Tuple[str, str]:
    """
    Split fetch identifiers into (contest, task)

    ``<task>`` takes the contest from the current directory name,
    ``<contest> <task>`` is used as given.

    Raises:
        CptaskError: If not given one or two identifiers
    """
    if len(identifiers) == 1:
        return default_contest(cwd, fallback_contest), identifiers[0]
    if len(identifiers) == 2:
        return identifiers[0], identifiers[1]
    raise CptaskError(f"expected 1 or 2 identifiers, got {len(identifiers)}")


def fetch_samples(
    identifiers: List[str],
    config: Config,
    problem_id: Optional[str] = None,
    lang: Optional[str] = None,
    overwrite: bool = False,
    cwd: Optional[Path] = None,
    client: Optional[AtCoderClient] = None
) -> WriteReport:
    """
    Download a task page and store its samples

    Samples go to ``<root>/<out_dir>/<task lowercased>/NNN.{in,out}``.

    Args:
        identifiers: ``[task]`` or ``[contest, task]``
        config: Configuration (out_dir is taken from config.workspace)
        problem_id: Explicit problem id, defaults to ``<contest>_<task>``
        lang: Optional language query parameter
        overwrite: Replace existing sample pairs
        cwd: Working directory, defaults to the process's
        client: HTTP client to use

    Returns:
        WriteReport: Indices written and skipped
    """
    contest, task = resolve_identifiers(identifiers, cwd, config.workspace.fallback_contest)
    problem_id = problem_id or f"{contest}_{task}"

    owns_client = client is None
    if client is None:
        client = AtCoderClient(
            base_url=config.http.base_url,
            user_agent=config.http.user_agent,
            timeout=config.http.timeout
        )
    try:
        html = client.fetch_task_page(contest, problem_id, lang)
    finally:
        if owns_client:
            client.close()
    samples = require_samples(html)
    log_info(f"Found {len(samples)} samples for {problem_id}")

    project_root = find_project_root(cwd, config.workspace.manifest_name)
    out_dir = project_root / config.workspace.out_dir / task.lower()
    writer = SampleWriter(out_dir, overwrite=overwrite, project_root=project_root)
    return writer.write(samples)


def run_case(
    binary: str,
    config: Config,
    case: Optional[str] = None,
    release: bool = False,
    cwd: Optional[Path] = None
) -> int:
    """
    Run one binary with a sample input piped to stdin

    Args:
        binary: Binary name (e.g. "a"), also the sample subdirectory
        config: Configuration (tests_dir is taken from config.workspace)
        case: Case token ("1", "001", ...), defaults to config.workspace.default_case
        release: Build in release mode
        cwd: Working directory, defaults to the process's

    Returns:
        int: Exit status of cargo run
    """
    project_root = find_project_root(cwd, config.workspace.manifest_name)
    case = case or config.workspace.default_case
    sample_dir = project_root / config.workspace.tests_dir / binary

    input_path = resolve_case(sample_dir, case)
    try:
        stdin = input_path.read_bytes()
    except OSError as e:
        raise WorkspaceError(f"failed to read {input_path}: {e}", input_path) from e

    print(f"cargo run --bin {binary} < {rel_path(input_path, project_root)}", flush=True)
    cargo = CargoClient(project_root, cargo=config.cargo.cargo)
    return cargo.run_binary(binary, stdin, release=release)


def run_tests(
    config: Config,
    target: Optional[str] = None,
    release: bool = False,
    cwd: Optional[Path] = None
) -> int:
    """
    Run the workspace test suite, optionally scoped to one task

    Args:
        config: Configuration
        target: Task letter or test binary name ("b" or "b_test")
        release: Test in release mode
        cwd: Working directory, defaults to the process's

    Returns:
        int: Exit status of cargo test
    """
    project_root = find_project_root(cwd, config.workspace.manifest_name)
    package = package_name(project_root, config.workspace.manifest_name)
    test_target = normalize_optional_target(target)
    if test_target is not None:
        log_debug(f"Scoping tests to {test_target.test_name} / {test_target.filter_name}")

    cargo = CargoClient(project_root, cargo=config.cargo.cargo)
    return cargo.run_tests(package, test_target, release=release)
