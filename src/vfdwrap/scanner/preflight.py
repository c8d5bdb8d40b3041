"""Cheap substring checks run before scoring."""

from __future__ import annotations

WRAPPER_NAME = "toNative"

REJECT_MARKERS = (
    "type=style",  # style sub-block of the component file
    "type=template",  # template sub-block
    WRAPPER_NAME,  # already wrapped
)


def passes_preflight(code: str) -> bool:
    """Return False for text that can never need the toNative wrap."""
    return not any(marker in code for marker in REJECT_MARKERS)
