"""
Data Model Definition - Samples and Test Targets
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class SampleKind(Enum):
    """Kind of a sample section, decided by its heading"""
    INPUT = "input"
    OUTPUT = "output"


class SamplePair(BaseModel):
    """One sample input and its expected output"""
    input: str
    output: str

    model_config = ConfigDict(frozen=True, extra="forbid")


# Sample index (1-based) -> pair, iterated in ascending index order
SampleCollection = Dict[int, SamplePair]


def stem_for_index(index: int) -> str:
    """File stem used for a sample index, e.g. 1 -> "001"."""
    return f"{index:03d}"


@dataclass(frozen=True)
class TestTarget:
    """Test binary and filter derived from a task slug"""
    slug: str
    test_name: str

    # keep pytest from collecting this class
    __test__ = False

    @property
    def filter_name(self) -> str:
        return f"{self.slug}_all_cases"


@dataclass
class WriteReport:
    """Outcome of persisting a sample collection"""
    written: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)
    paths: List[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.written)
