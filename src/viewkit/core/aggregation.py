"""Aggregating the required parts of a view into one boolean.

This module provides:
- AggregationResult: Satisfied(bool) or NO_QUALIFYING_PARTS
- evaluate: the single-pass enumerate, filter, dispatch, short-circuit reduction
- compute_is_loaded / compute_is_displayed: the call surfaces used by views
  and composite elements from their own is_loaded()/is_displayed()

Predicate failures are not caught: a stale element or driver error raised by
a part propagates to the caller instead of reading as "not displayed".
"""

from dataclasses import dataclass

import structlog

from viewkit.core.declarations import RequirementPolicy, policy_of, scan_parts
from viewkit.core.dispatch import predicate_for
from viewkit.core.exceptions import NoRequiredPartsError

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Satisfied:
    """Aggregation ran over at least one required part."""

    value: bool

    def __bool__(self) -> bool:
        return self.value


class NoQualifyingParts:
    """Aggregation found no required parts. Not a boolean on purpose."""

    _instance: "NoQualifyingParts | None" = None

    def __new__(cls) -> "NoQualifyingParts":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        raise TypeError("NoQualifyingParts has no truth value")

    def __repr__(self) -> str:
        return "NO_QUALIFYING_PARTS"


NO_QUALIFYING_PARTS = NoQualifyingParts()

AggregationResult = Satisfied | NoQualifyingParts


def evaluate(
    consumer: object,
    policy: RequirementPolicy | None = None,
) -> AggregationResult:
    """Evaluate every required part of ``consumer`` in declaration order.

    Args:
        consumer: A view or composite element with declared parts.
        policy: Requirement policy; defaults to the one the consumer's class
            declares.

    Returns:
        Satisfied(False) at the first part whose predicate is False (later
        parts are not checked), Satisfied(True) if all are True, or
        NO_QUALIFYING_PARTS if no part is required.
    """
    if policy is None:
        policy = policy_of(consumer)
    consumer_name = type(consumer).__qualname__

    required = [
        part for part in scan_parts(consumer) if part.is_required(policy)
    ]
    if not required:
        log.debug("no_required_parts", consumer=consumer_name, policy=policy.name)
        return NO_QUALIFYING_PARTS

    log.debug(
        "requirement_evaluation_started",
        consumer=consumer_name,
        policy=policy.name,
        parts=[part.name for part in required],
    )
    for part in required:
        predicate = predicate_for(part.handle, part.name)
        if not predicate():
            log.debug("required_part_unsatisfied", consumer=consumer_name, part=part.name)
            return Satisfied(False)

    return Satisfied(True)


def _resolve(consumer: object) -> bool:
    policy = policy_of(consumer)
    result = evaluate(consumer, policy)
    if isinstance(result, NoQualifyingParts):
        raise NoRequiredPartsError(type(consumer), policy)
    return result.value


def compute_is_loaded(consumer: object) -> bool:
    """Return whether every required part of a view is satisfied.

    Raises:
        NoRequiredPartsError: If the view declares no required parts.
    """
    return _resolve(consumer)


def compute_is_displayed(consumer: object) -> bool:
    """Return whether every required part of a composite element is satisfied.

    Raises:
        NoRequiredPartsError: If the element declares no required parts.
    """
    return _resolve(consumer)
