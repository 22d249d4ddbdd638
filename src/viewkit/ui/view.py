"""Base class for page objects."""

from typing import Any

import structlog

from viewkit.core.aggregation import compute_is_loaded
from viewkit.core.capabilities import View
from viewkit.core.exceptions import NullContextError
from viewkit.ui.context import DefaultContextSelection

log = structlog.get_logger(__name__)


class AbstractView(View):
    """A view whose loaded state comes from its declared parts.

    Subclasses declare parts as annotated members and may override
    ``is_loaded`` to add checks, calling ``super().is_loaded()`` for the
    declared requirements.

    Example:
        class LoginView(AbstractView):
            username: Annotated[Composite, Require]
            password: Annotated[Composite, Require]
    """

    def __init__(self, context: Any = None) -> None:
        self._context = context

    @property
    def context(self) -> Any:
        if self._context is None:
            raise NullContextError(
                f"{type(self).__qualname__} has no context; call set_context() first"
            )
        return self._context

    def set_context(self, context: Any) -> "AbstractView":
        """Attach the browser, frame or window this view lives in."""
        log.debug("view_context_set", view=type(self).__qualname__)
        self._context = context
        return self

    def has_context(self) -> bool:
        return self._context is not None

    def select(self) -> DefaultContextSelection:
        """Return a selection of child contexts of this view's context."""
        return DefaultContextSelection(self.context)

    def is_loaded(self) -> bool:
        return compute_is_loaded(self)
