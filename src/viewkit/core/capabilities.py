"""Capability interfaces a declared part can implement.

Three capabilities exist, from most general to most specific:

- Discoverable: can tell whether it is present.
- Composite: a displayable unit; can tell whether it is displayed.
- View: a logical screen or component; can tell whether it is loaded.

A single object may implement several of them. When that happens the
dispatcher picks one predicate in the order View, Composite, Discoverable.
Objects that cannot inherit from these classes (third-party wrappers) can
be registered as virtual subclasses with ``Composite.register(cls)``.
"""

from abc import ABC, abstractmethod


class Discoverable(ABC):
    """Something that may or may not currently exist in the UI."""

    @abstractmethod
    def is_present(self) -> bool:
        """Return True if the thing currently exists."""


class Composite(Discoverable):
    """A displayable element, possibly made of other elements."""

    @abstractmethod
    def is_displayed(self) -> bool:
        """Return True if the element is currently visible."""


class View(ABC):
    """A logical unit of UI state (page, dialog, panel)."""

    @abstractmethod
    def is_loaded(self) -> bool:
        """Return True if the view is ready for interaction."""
