"""viewkit: page objects that know when they are loaded."""

from viewkit.core import (
    Composite,
    Context,
    Discoverable,
    NotRequired,
    Require,
    RequirementPolicy,
    View,
    compute_is_displayed,
    compute_is_loaded,
    require_all,
)
from viewkit.core.exceptions import NoRequiredPartsError, ViewKitError
from viewkit.ui import AbstractView, AbstractViewElement

__version__ = "0.1.0"

__all__ = [
    "AbstractView",
    "AbstractViewElement",
    "Composite",
    "Context",
    "Discoverable",
    "NoRequiredPartsError",
    "NotRequired",
    "Require",
    "RequirementPolicy",
    "View",
    "ViewKitError",
    "compute_is_displayed",
    "compute_is_loaded",
    "require_all",
]
