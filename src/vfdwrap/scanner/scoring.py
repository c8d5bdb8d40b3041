"""Confidence scoring for class-style component detection."""

from __future__ import annotations

import re

from vfdwrap.core.models import THRESHOLD, ConfidenceReport, Rule, RuleHit
from vfdwrap.scanner.preflight import passes_preflight

LIBRARY_NAME = "vue-facing-decorator"

# Points added (or removed) when a rule matches
WEIGHTS = {
    Rule.LIBRARY_IMPORT: 40,
    Rule.VUE_SUBCLASS: 40,
    Rule.ANY_SUBCLASS: 10,
    Rule.NON_OBJECT_DEFAULT_EXPORT: 1,
    Rule.LOWERCASE_DEFAULT_EXPORT: -1,
}

PATTERNS = {
    Rule.LIBRARY_IMPORT: re.compile(r"""from\s+['"]""" + re.escape(LIBRARY_NAME) + r"""['"]"""),
    Rule.VUE_SUBCLASS: re.compile(r"class.*extends\sVue"),
    Rule.ANY_SUBCLASS: re.compile(r"class.*extends"),
    Rule.NON_OBJECT_DEFAULT_EXPORT: re.compile(r"export\sdefault\s(?!\{)"),
    Rule.LOWERCASE_DEFAULT_EXPORT: re.compile(r"export\sdefault\s(?!class)(?![A-Z])"),
}


def compute_confidence(code: str) -> ConfidenceReport:
    """
    Score how likely `code` is to define a class-style component.

    Library import: +40.
    Subclass of Vue: +40, otherwise any subclass: +10.
    Above the threshold at this point the remaining rules are skipped.
    Default export of something other than an object literal: +1.
    Default export that is neither `class` nor capitalised: -1.
    """
    report = ConfidenceReport()

    def _check(rule: Rule) -> bool:
        match = PATTERNS[rule].search(code)
        if match is None:
            return False
        weight = WEIGHTS[rule]
        report.score += weight
        report.hits.append(RuleHit(rule=rule, weight=weight, snippet=match.group(0)))
        return True

    _check(Rule.LIBRARY_IMPORT)

    if not _check(Rule.VUE_SUBCLASS):
        _check(Rule.ANY_SUBCLASS)

    if report.score > THRESHOLD:
        report.early_exit = True
        return report

    # Tie-breakers for the 50 point case: a library import plus a class
    # extending some other base.
    _check(Rule.NON_OBJECT_DEFAULT_EXPORT)
    _check(Rule.LOWERCASE_DEFAULT_EXPORT)

    return report


def exports_class_component(code: str) -> bool:
    """Return True when `code` scores above the threshold."""
    return compute_confidence(code).is_class_component


def is_class_component(code: str) -> bool:
    """Default predicate: preflight first, then the scoring pass."""
    return passes_preflight(code) and exports_class_component(code)
