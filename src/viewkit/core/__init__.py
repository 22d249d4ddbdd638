"""Requirement introspection for views and composite elements.

This module provides:
- Capability interfaces (View, Composite, Discoverable)
- Part declarations (Require, NotRequired, Context, require_all)
- The aggregator (evaluate, compute_is_loaded, compute_is_displayed)
"""

from viewkit.core.aggregation import (
    NO_QUALIFYING_PARTS,
    AggregationResult,
    NoQualifyingParts,
    Satisfied,
    compute_is_displayed,
    compute_is_loaded,
    evaluate,
)
from viewkit.core.capabilities import Composite, Discoverable, View
from viewkit.core.declarations import (
    Context,
    DeclaredPart,
    NotRequired,
    Require,
    RequirementPolicy,
    require_all,
    scan_parts,
)
from viewkit.core.dispatch import predicate_for

__all__ = [
    "NO_QUALIFYING_PARTS",
    "AggregationResult",
    "Composite",
    "Context",
    "DeclaredPart",
    "Discoverable",
    "NoQualifyingParts",
    "NotRequired",
    "Require",
    "RequirementPolicy",
    "Satisfied",
    "View",
    "compute_is_displayed",
    "compute_is_loaded",
    "evaluate",
    "predicate_for",
    "require_all",
    "scan_parts",
]
