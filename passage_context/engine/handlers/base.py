"""Base infrastructure for tool handlers.

Each handler receives a HandlerContext with shared collaborators and
returns a ToolResult.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Coroutine

from ...services.text_loader import TextLoader
from ..cache import ContentCache

if TYPE_CHECKING:
    from ...config import Settings
    from ...models import HeartOfDarknessCall, PassageQueryCall, ToolResult


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Decouples handlers from the ContextEngine class.
    """

    settings: "Settings"
    cache: ContentCache
    loader: TextLoader


# Type alias for handler functions
HandlerFunc = Callable[
    ["HeartOfDarknessCall | PassageQueryCall", HandlerContext],
    Coroutine[None, None, "ToolResult"],
]
