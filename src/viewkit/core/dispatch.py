"""Choosing the truth predicate for a declared part."""

from collections.abc import Callable

from viewkit.core.capabilities import Composite, Discoverable, View
from viewkit.core.exceptions import UnsupportedPartError

Predicate = Callable[[], bool]

# Highest priority first
CAPABILITY_PRIORITY: tuple[tuple[type, str], ...] = (
    (View, "is_loaded"),
    (Composite, "is_displayed"),
    (Discoverable, "is_present"),
)


def predicate_for(handle: object, name: str = "<part>") -> Predicate:
    """Return the bound predicate that decides whether ``handle`` is satisfied.

    A nested View is checked with ``is_loaded`` (which recursively runs the
    same aggregation on that view), a Composite with ``is_displayed`` and a
    plain Discoverable with ``is_present``. When a handle implements more
    than one capability, only the highest-priority predicate is used.

    Args:
        handle: Current value of the declared part.
        name: Member name, used in the error message.

    Returns:
        A zero-argument callable returning bool. It is not called here.

    Raises:
        UnsupportedPartError: If the handle implements none of the capabilities.
    """
    for capability, method in CAPABILITY_PRIORITY:
        if isinstance(handle, capability):
            predicate: Predicate = getattr(handle, method)
            return predicate
    raise UnsupportedPartError(name, handle)
