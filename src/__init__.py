"""Draft, publish and unpublish posts for a static-site blog."""

from draftsman.config import DraftsmanConfig, load_config
from draftsman.errors import DraftsmanError, InvalidArgumentError, PostNotFoundError
from draftsman.lifecycle import LifecycleResult, PostEntry, PostLifecycle, PostState

__version__ = "0.1.0"

__all__ = [
    "DraftsmanConfig",
    "DraftsmanError",
    "InvalidArgumentError",
    "LifecycleResult",
    "PostEntry",
    "PostLifecycle",
    "PostNotFoundError",
    "PostState",
    "__version__",
    "load_config",
]
