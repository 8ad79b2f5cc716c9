"""
Sample Writer

Persists extracted sample pairs as NNN.in / NNN.out files
"""

from pathlib import Path
from typing import Optional

from ..data.models import SampleCollection, WriteReport, stem_for_index
from ..errors import WorkspaceError
from ..utils.helpers import rel_path
from ..utils.logger import log_debug


class SampleWriter:
    """
    Sample Writer

    Writes each pair to <out_dir>/<NNN>.in and <out_dir>/<NNN>.out. Unless
    overwrite is set, a pair whose two files both exist is skipped; if only
    one of them exists both are rewritten.
    """

    def __init__(
        self,
        out_dir: Path,
        overwrite: bool = False,
        project_root: Optional[Path] = None
    ):
        """
        Initialize Sample Writer

        Args:
            out_dir: Directory receiving the sample files
            overwrite: Replace pairs that already exist
            project_root: Root used to shorten printed paths
        """
        self.out_dir = Path(out_dir)
        self.overwrite = overwrite
        self.project_root = project_root

    def _display(self, path: Path) -> str:
        if self.project_root is None:
            return str(path)
        return rel_path(path, self.project_root)

    def _write_file(self, path: Path, content: str):
        try:
            # newline="" keeps "\n" as-is on every platform
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise WorkspaceError(f"failed to write {path}: {e}", path) from e

    def ensure_directory(self):
        try:
            self.out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceError(
                f"failed to create directory {self.out_dir}: {e}", self.out_dir
            ) from e

    def write(self, samples: SampleCollection) -> WriteReport:
        """
        Write all pairs in ascending index order

        Args:
            samples: Pairs keyed by sample index

        Returns:
            WriteReport: Indices written and skipped
        """
        self.ensure_directory()
        report = WriteReport()

        for index in sorted(samples):
            sample = samples[index]
            file_stem = stem_for_index(index)
            input_path = self.out_dir / f"{file_stem}.in"
            output_path = self.out_dir / f"{file_stem}.out"

            if not self.overwrite and input_path.exists() and output_path.exists():
                print(f"skip existing sample {file_stem} (use --overwrite to replace)")
                report.skipped.append(index)
                continue

            self._write_file(input_path, sample.input)
            self._write_file(output_path, sample.output)
            print(
                f"wrote samples: {self._display(input_path)} and {self._display(output_path)}"
            )
            log_debug(f"Sample {index}: {len(sample.input)} input / {len(sample.output)} output chars")
            report.written.append(index)
            report.paths.extend([input_path, output_path])

        if report.count == 0:
            print("no new samples were written")

        return report
