"""
Cargo Process Client

Builds and runs cargo commands for the contest workspace
"""

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from ..data.models import TestTarget
from ..errors import CommandError
from ..utils.logger import log_debug


class CargoClient:
    """
    Cargo Client

    Spawns cargo in the workspace root, inheriting stdout and stderr
    """

    def __init__(self, project_root: Path, cargo: str = "cargo"):
        """
        Initialize Cargo Client

        Args:
            project_root: Directory cargo runs in
            cargo: Cargo executable
        """
        self.project_root = Path(project_root)
        self.cargo = cargo

    def run_command(self, args: List[str], stdin: Optional[bytes] = None) -> int:
        """
        Run cargo and wait for it to finish

        Args:
            args: Arguments after the cargo executable
            stdin: Bytes piped to standard input, None to inherit it

        Returns:
            int: Exit status (always 0)

        Raises:
            CommandError: If cargo cannot be spawned or exits unsuccessfully
        """
        command = [self.cargo, *args]
        label = f"cargo {args[0]}" if args else "cargo"
        log_debug(f"Running {shlex.join(command)} in {self.project_root}")

        try:
            completed = subprocess.run(command, input=stdin, cwd=self.project_root)
        except OSError as e:
            raise CommandError(f"failed to spawn {label}: {e}", command) from e

        if completed.returncode != 0:
            raise CommandError(
                f"{label} exited with status {completed.returncode}",
                command,
                returncode=completed.returncode
            )
        return completed.returncode

    @staticmethod
    def run_args(binary: str, release: bool = False) -> List[str]:
        args = ["run", "--bin", binary]
        if release:
            args.append("--release")
        return args

    @staticmethod
    def test_args(package: str, target: Optional[TestTarget] = None, release: bool = False) -> List[str]:
        """
        Arguments for ``cargo test``, scoped to one task when a target is given

        Example: ``test -p pkg --test b_test -- --exact b_all_cases``
        """
        args = ["test", "-p", package]
        if target is not None:
            args.extend(["--test", target.test_name])
        if release:
            args.append("--release")
        if target is not None:
            args.extend(["--", "--exact", target.filter_name])
        return args

    def run_binary(self, binary: str, stdin: bytes, release: bool = False) -> int:
        return self.run_command(self.run_args(binary, release), stdin=stdin)

    def run_tests(self, package: str, target: Optional[TestTarget] = None, release: bool = False) -> int:
        return self.run_command(self.test_args(package, target, release))
