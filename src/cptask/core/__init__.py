"""
Core module - sample extraction, case resolution and sample writing
"""

from .extractor import (
    classify_heading,
    extract_index,
    normalize_pre,
    ensure_trailing_newline,
    parse_samples,
    require_samples,
)
from .resolver import candidate_inputs, resolve_case, normalize_target
from .writer import SampleWriter

__all__ = [
    "classify_heading",
    "extract_index",
    "normalize_pre",
    "ensure_trailing_newline",
    "parse_samples",
    "require_samples",
    "candidate_inputs",
    "resolve_case",
    "normalize_target",
    "SampleWriter",
]
