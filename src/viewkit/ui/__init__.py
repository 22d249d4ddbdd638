"""Page-object base classes."""

from viewkit.ui.context import ContextSelection, DefaultContextSelection, Locator
from viewkit.ui.view import AbstractView
from viewkit.ui.view_element import AbstractViewElement

__all__ = [
    "AbstractView",
    "AbstractViewElement",
    "ContextSelection",
    "DefaultContextSelection",
    "Locator",
]
