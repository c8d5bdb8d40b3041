"""Rewrites the Vue loader's generated default export through toNative."""

from __future__ import annotations

import re
from typing import Callable

from vfdwrap.core.models import TransformResult
from vfdwrap.scanner.preflight import WRAPPER_NAME
from vfdwrap.scanner.scoring import LIBRARY_NAME, is_class_component

INTERNAL_BINDING = "_sfc_main"

WRAPPER_IMPORT = f'\nimport {{{WRAPPER_NAME}}} from "{LIBRARY_NAME}";\n'

# Match: const _sfc_main = Identifier;
ASSIGNMENT = re.compile(rf"const {INTERNAL_BINDING} = ([A-Za-z]*);", re.IGNORECASE)
REPLACEMENT = rf"const {INTERNAL_BINDING} = {WRAPPER_NAME}(\1);"


def rewrite(code: str) -> TransformResult:
    """Prepend the toNative import and wrap every generated assignment."""
    replaced, count = ASSIGNMENT.subn(REPLACEMENT, code)
    return TransformResult(
        code=WRAPPER_IMPORT + replaced,
        changed=True,
        replacements=count,
    )


def apply_transform(code: str) -> str:
    return rewrite(code).code


def transform_result(
    code: str,
    predicate: Callable[[str], bool] | None = None,
) -> TransformResult:
    """Run the predicate and rewrite only when it accepts the text."""
    check = predicate or is_class_component
    if not check(code):
        return TransformResult(code=code, changed=False)
    return rewrite(code)


def transform(code: str, predicate: Callable[[str], bool] | None = None) -> str:
    """Return `code` unchanged, or rewritten when the predicate accepts it."""
    return transform_result(code, predicate).code
