"""Declaring the parts of a view and scanning them.

Parts are declared as class annotations. Markers are attached with
``typing.Annotated``::

    @require_all
    class LoginView(AbstractView):
        username: Annotated[Composite, Require]
        banner: Annotated[Composite, NotRequired]
        frame: Annotated[View, Context]
        submit: Composite

Declarations (names, markers and whether the declared type is a capability)
are resolved once per class. Values are read from the instance on every scan
so a view whose parts are replaced between calls is evaluated against its
current parts.

Annotations are evaluated with ``typing.get_type_hints``. Part types must be
resolvable from the module that declares the view: with
``from __future__ import annotations``, a part type defined inside a
function cannot be resolved and the class raises ConfigurationError.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

import structlog

from viewkit.core.capabilities import Composite, Discoverable, View
from viewkit.core.exceptions import ConfigurationError

log = structlog.get_logger(__name__)

C = TypeVar("C", bound=type)

_DECLARATIONS_ATTR = "__viewkit_declarations__"


class RequirementPolicy(Enum):
    """Which declared parts count towards loaded/displayed."""

    EXPLICIT_ONLY = "explicit_only"  # Only parts marked Require
    ALL_BY_DEFAULT = "all_by_default"  # Every part unless marked NotRequired


class _Marker:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


Require = _Marker("Require")
NotRequired = _Marker("NotRequired")
Context = _Marker("Context")

_MARKERS = (Require, NotRequired, Context)


def require_all(cls: C) -> C:
    """Class decorator: every declared part is required unless NotRequired."""
    cls.__requirement_policy__ = RequirementPolicy.ALL_BY_DEFAULT
    return cls


def policy_of(consumer: object) -> RequirementPolicy:
    """Return the requirement policy declared by the consumer's class."""
    policy = getattr(type(consumer), "__requirement_policy__", RequirementPolicy.EXPLICIT_ONLY)
    if not isinstance(policy, RequirementPolicy):
        raise ConfigurationError(
            f"{type(consumer).__qualname__}.__requirement_policy__ must be a "
            f"RequirementPolicy, got {policy!r}"
        )
    return policy


@dataclass(frozen=True)
class Declaration:
    """Name and markers of one declared member, resolved per class."""

    name: str
    require: bool = False
    not_required: bool = False
    contextual: bool = False
    capability_typed: bool = False

    @property
    def marked(self) -> bool:
        return self.require or self.not_required or self.contextual


@dataclass(frozen=True)
class DeclaredPart:
    """One constituent of a view or composite element, as found by a scan.

    Attributes:
        name: Member name on the consumer.
        handle: The member's current value.
        require: Carries an explicit Require marker.
        not_required: Carries an explicit NotRequired marker.
        contextual: Carries a Context marker; never counts as required.
    """

    name: str
    handle: Any
    require: bool = False
    not_required: bool = False
    contextual: bool = False

    def is_required(self, policy: RequirementPolicy) -> bool:
        """Whether this part takes part in aggregation under ``policy``."""
        if self.contextual:
            return False
        if policy is RequirementPolicy.ALL_BY_DEFAULT:
            return not self.not_required
        return self.require


def _markers_of(annotation: Any) -> tuple[Any, ...]:
    if typing.get_origin(annotation) is typing.Annotated:
        return tuple(
            m for m in annotation.__metadata__ if any(m is marker for marker in _MARKERS)
        )
    return ()


def _is_capability_type(annotation: Any) -> bool:
    if typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        return any(_is_capability_type(arg) for arg in typing.get_args(annotation))
    return isinstance(annotation, type) and issubclass(
        annotation, (View, Composite, Discoverable)
    )


def _class_declarations(cls: type) -> tuple[Declaration, ...]:
    # Looked up in the class's own __dict__ so subclasses get their own cache
    cached = cls.__dict__.get(_DECLARATIONS_ATTR)
    if cached is not None:
        return cached

    ordered: dict[str, Declaration] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        own = inspect.get_annotations(klass)
        if not own:
            continue
        try:
            hints = typing.get_type_hints(klass, include_extras=True)
        except NameError as exc:
            raise ConfigurationError(
                f"Cannot resolve annotations of {klass.__qualname__}: {exc}. "
                "Part types must be importable from the declaring module."
            ) from exc
        for name in own:
            if name.startswith("__"):
                continue
            hint = hints.get(name)
            markers = _markers_of(hint)
            if Require in markers and NotRequired in markers:
                raise ConfigurationError(
                    f"{klass.__qualname__}.{name} is marked both Require and NotRequired"
                )
            ordered[name] = Declaration(
                name=name,
                require=Require in markers,
                not_required=NotRequired in markers,
                contextual=Context in markers,
                capability_typed=_is_capability_type(hint),
            )

    declarations = tuple(ordered.values())
    setattr(cls, _DECLARATIONS_ATTR, declarations)
    log.debug(
        "declarations_resolved",
        consumer=cls.__qualname__,
        members=[d.name for d in declarations],
    )
    return declarations


def _has_capability(value: object) -> bool:
    return isinstance(value, (View, Composite, Discoverable))


def scan_parts(consumer: object) -> Iterator[DeclaredPart]:
    """Yield the consumer's declared parts in declaration order.

    A member is a part when it carries a marker, when its annotated type is
    a capability, or when its value implements one. Plain data attributes
    such as ``url: str`` are ignored. Parts are yielded even when unset
    (None handle) so a required one fails dispatch instead of vanishing.
    """
    for declaration in _class_declarations(type(consumer)):
        value = getattr(consumer, declaration.name, None)
        is_part = (
            declaration.marked
            or declaration.capability_typed
            or _has_capability(value)
        )
        if not is_part:
            continue
        if value is None:
            log.debug(
                "declared_part_unset",
                consumer=type(consumer).__qualname__,
                part=declaration.name,
            )
        yield DeclaredPart(
            name=declaration.name,
            handle=value,
            require=declaration.require,
            not_required=declaration.not_required,
            contextual=declaration.contextual,
        )
