from __future__ import annotations

"""
Artifact Annotation Extractor.

Scans the textual content of a single build artifact for the '@ignore' and
'@description' comment markers. Development builds still carry the escaped
line-break sequences emitted by the bundler, so the description line has to
be split on the two-character escape instead of a real line feed.
"""

from dataclasses import dataclass
from typing import List, Optional

from wbmetajson.domain.constants import (
    DESCRIPTION_MARKER,
    ENV_PRODUCTION,
    ESCAPED_CARRIAGE_RETURN,
    ESCAPED_LINE_FEED,
    IGNORE_MARKER,
)


@dataclass(frozen=True)
class FileAnnotation:
    """
    Markers found in one artifact.

    Attributes:
        ignored: True if any line carries the ignore marker.
        description: Trimmed text following the first description marker.
    """
    ignored: bool
    description: str


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_file_annotation(content: str, environment: str) -> FileAnnotation:
    """
    Extract both markers from an artifact's content.

    Args:
        content: Artifact text.
        environment: Build environment flag ('production' or other).

    Returns:
        FileAnnotation: The ignore flag and the extracted description.
    """
    return FileAnnotation(
        ignored=is_ignored(content),
        description=get_file_description(content, environment),
    )


def is_ignored(content: str) -> bool:
    """Check whether any line of the content carries the ignore marker."""
    return any(IGNORE_MARKER in line for line in content.split("\n"))


def get_file_description(content: str, environment: str) -> str:
    """
    Extract the description comment of an artifact.

    Only the first line containing the marker is honored.

    Args:
        content: Artifact text (minified bundle output).
        environment: 'production' for normalized line breaks; any other value
                     assumes escaped '\\n' / '\\r' sequences inside the line.

    Returns:
        str: The trimmed description, or '' when no marker is present.
    """
    marker_line = _first_line_with(content.split("\n"), DESCRIPTION_MARKER)
    if marker_line is None:
        return ""

    if environment == ENV_PRODUCTION:
        return _text_after_marker(marker_line)

    tokens = [
        token.replace(ESCAPED_CARRIAGE_RETURN, "", 1)
        for token in marker_line.split(ESCAPED_LINE_FEED)
        if DESCRIPTION_MARKER in token
    ]
    if not tokens:
        return ""
    return _text_after_marker(tokens[0])


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _first_line_with(lines: List[str], marker: str) -> Optional[str]:
    for line in lines:
        if marker in line:
            return line
    return None


def _text_after_marker(line: str) -> str:
    # Text after the last marker occurrence on the line
    return line.split(DESCRIPTION_MARKER)[-1].strip()
