"""
Sample Extractor

Parses a task page into ordered (index, input, output) sample pairs
"""

import re
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from ..data.models import SampleCollection, SampleKind, SamplePair
from ..errors import NoSamplesError
from ..utils.logger import log_debug


# Headings are matched by substring, English and Japanese forms
INPUT_MARKERS = ("Sample Input", "入力例")
OUTPUT_MARKERS = ("Sample Output", "出力例")

index_pattern = re.compile(r"(\d+)\s*$", re.ASCII)


def classify_heading(title: str) -> Optional[SampleKind]:
    """
    Decide whether a section heading introduces a sample input or output

    Args:
        title: Heading text

    Returns:
        SampleKind: INPUT or OUTPUT, None for any other heading
    """
    title = title.strip()
    if any(marker in title for marker in INPUT_MARKERS):
        return SampleKind.INPUT
    if any(marker in title for marker in OUTPUT_MARKERS):
        return SampleKind.OUTPUT
    return None


def extract_index(title: str) -> Optional[int]:
    """
    Extract the sample index from the trailing digit run of a heading

    Only digits at the very end of the heading (optionally followed by
    whitespace) count. Zero is treated as absent.

    Args:
        title: Heading text

    Returns:
        int: 1-based sample index, None if there is none
    """
    match = index_pattern.search(title.strip())
    if not match:
        return None
    index = int(match.group(1))
    if index == 0:
        return None
    return index


def normalize_pre(raw: str) -> str:
    return raw.replace("\r\n", "\n")


def ensure_trailing_newline(text: str) -> str:
    if not text.endswith("\n"):
        text += "\n"
    return text


def _pre_text(pre: Tag) -> str:
    text = pre.get_text()
    # HTML parsing drops a single newline directly after <pre>
    if text.startswith("\r\n"):
        return text[2:]
    if text.startswith("\n"):
        return text[1:]
    return text


def parse_samples(html: str) -> SampleCollection:
    """
    Parse every sample section of a task page

    A section contributes only when its first <h3> carries a sample marker
    and a trailing index, and it holds a <pre> block. Inputs and outputs
    are collected separately (later sections overwrite earlier ones with
    the same index) and paired by index.

    Args:
        html: Full page HTML

    Returns:
        SampleCollection: Pairs keyed by index, in ascending index order
    """
    soup = BeautifulSoup(html, "html.parser")

    inputs: Dict[int, str] = {}
    outputs: Dict[int, str] = {}

    for section in soup.find_all("section"):
        heading = section.find("h3")
        if heading is None:
            continue
        title = heading.get_text().strip()
        kind = classify_heading(title)
        if kind is None:
            continue
        pre = section.find("pre")
        if pre is None:
            continue
        index = extract_index(title)
        if index is None:
            log_debug(f"Skipping sample heading without index: {title!r}")
            continue

        content = ensure_trailing_newline(normalize_pre(_pre_text(pre)))
        if kind is SampleKind.INPUT:
            inputs[index] = content
        else:
            outputs[index] = content

    samples: SampleCollection = {}
    for index in sorted(inputs):
        if index in outputs:
            samples[index] = SamplePair(input=inputs[index], output=outputs[index])
        else:
            log_debug(f"Dropping sample input {index} without matching output")

    return samples


def require_samples(html: str) -> SampleCollection:
    """Parse samples, raising NoSamplesError when no complete pair exists."""
    samples = parse_samples(html)
    if not samples:
        raise NoSamplesError("no samples found on the page")
    return samples
