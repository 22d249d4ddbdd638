"""Selecting nested contexts (frames, windows, sub-views) from a parent.

Locator resolution itself belongs to the browser layer; this module only
routes a request to the locator together with the parent context.
"""

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Locator(Protocol):
    """Finds things of a given type within a parent context."""

    def find(self, target_type: type[T], parent: Any) -> T: ...

    def find_all(self, target_type: type[T], parent: Any) -> list[T]: ...


class ContextSelection(Protocol):
    """Selects child contexts of a known parent."""

    def of_type(self, context_type: type[T], locator: Locator) -> T: ...

    def list_of_type(self, context_type: type[T], locator: Locator) -> list[T]: ...


class DefaultContextSelection:
    """ContextSelection that hands the parent context to the locator."""

    def __init__(self, parent_context: Any) -> None:
        self.parent_context = parent_context

    def of_type(self, context_type: type[T], locator: Locator) -> T:
        return locator.find(context_type, self.parent_context)

    def list_of_type(self, context_type: type[T], locator: Locator) -> list[T]:
        return locator.find_all(context_type, self.parent_context)
