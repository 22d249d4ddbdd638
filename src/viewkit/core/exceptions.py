"""viewkit exception hierarchy.

This module defines the base exception class and the errors the page-object
core originates. Failures raised by element or view predicates are never
wrapped in these types; they propagate unchanged.
"""

from typing import Any


class ViewKitError(Exception):
    """Base exception for all viewkit errors.

    All custom exceptions in viewkit inherit from this class so a test run
    can catch page-object configuration problems in one place.
    """

    pass


class ConfigurationError(ViewKitError):
    """Raised when a view or element is declared incorrectly.

    Example:
        raise ConfigurationError("LoginView.username: conflicting markers")
    """

    pass


class NoRequiredPartsError(ViewKitError):
    """Raised when a view or element declares no required parts.

    A page object without any required part cannot say whether it is loaded
    or displayed. Reporting True would hide a broken page object, so this is
    an error rather than a result.

    Attributes:
        consumer_type: The class that was evaluated.
        policy: The requirement policy that was in effect.

    Example:
        raise NoRequiredPartsError(LoginView, RequirementPolicy.EXPLICIT_ONLY)
    """

    def __init__(self, consumer_type: type, policy: Any) -> None:
        self.consumer_type = consumer_type
        self.policy = policy
        super().__init__(
            f"{consumer_type.__qualname__} has no required parts "
            f"(policy={getattr(policy, 'name', policy)}). "
            "Mark at least one member with Require, or use @require_all."
        )


class UnsupportedPartError(ConfigurationError):
    """Raised when a required part implements none of the capabilities.

    Attributes:
        name: Member name of the part.
        handle: The offending value.
    """

    def __init__(self, name: str, handle: object) -> None:
        self.name = name
        self.handle = handle
        super().__init__(
            f"Required part '{name}' ({type(handle).__qualname__}) is not a "
            "View, Composite or Discoverable"
        )


class NullContextError(ViewKitError):
    """Raised when a view's context is used before one was set.

    Example:
        raise NullContextError("LoginView has no context; call set_context() first")
    """

    pass
