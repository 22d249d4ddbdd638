"""Base class for composite elements that are also views."""

from typing import Annotated

from viewkit.core.aggregation import compute_is_displayed, compute_is_loaded
from viewkit.core.capabilities import Composite, Discoverable, View
from viewkit.core.declarations import Context


class AbstractViewElement(View, Composite):
    """A reusable widget made of other elements, e.g. a search bar.

    The element is anchored to ``root``: it is present when the root is
    present, and displayed when all of its required parts are.

    Args:
        root: The element that contains this widget.
    """

    root: Annotated[Discoverable, Context]

    def __init__(self, root: Discoverable) -> None:
        self.root = root

    def is_present(self) -> bool:
        return self.root.is_present()

    def is_displayed(self) -> bool:
        return compute_is_displayed(self)

    def is_loaded(self) -> bool:
        return compute_is_loaded(self)
