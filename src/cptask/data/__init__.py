"""
Data module

Contains sample and test target definitions
"""

from .models import (
    SampleKind,
    SamplePair,
    SampleCollection,
    TestTarget,
    WriteReport,
    stem_for_index,
)

__all__ = [
    "SampleKind",
    "SamplePair",
    "SampleCollection",
    "TestTarget",
    "WriteReport",
    "stem_for_index",
]
