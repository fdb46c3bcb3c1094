"""Tool dispatcher for the passage context server."""

import logging
from typing import Any

from pydantic import ValidationError

from .config import Settings, settings as default_settings
from .engine.cache import ContentCache, document_cache
from .engine.handlers import (
    HandlerContext,
    HandlerFunc,
    handle_heart_of_darkness,
    handle_passage_query,
)
from .models import ToolName, ToolResult, parse_tool_call
from .services.text_loader import TextLoader

logger = logging.getLogger(__name__)

HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.HEART_OF_DARKNESS: handle_heart_of_darkness,
    ToolName.PASSAGE_QUERY: handle_passage_query,
}


class ContextEngine:
    """Validates tool calls and routes them to their handlers.

    Args:
        settings: Runtime settings; defaults to the module-level instance
        cache: Content cache shared across requests
        loader: Reference text loader; built from settings when omitted
    """

    def __init__(
        self,
        settings: Settings | None = None,
        cache: ContentCache = document_cache,
        loader: TextLoader | None = None,
    ):
        self.settings = settings or default_settings
        self.cache = cache
        self.loader = loader or TextLoader(
            self.settings.data_dir, self.settings.reference_text_file
        )

    @property
    def context(self) -> HandlerContext:
        return HandlerContext(settings=self.settings, cache=self.cache, loader=self.loader)

    async def execute(self, tool: ToolName | str, params: dict[str, Any]) -> ToolResult:
        """Run a tool.

        Raises:
            ValueError: Unknown tool or invalid parameters.
            DocumentLoadError: The reference text could not be loaded.
        """
        try:
            tool_name = ToolName(tool)
        except ValueError:
            raise ValueError(f"Unknown tool: {tool}") from None

        handler = HANDLERS.get(tool_name)
        if handler is None:
            raise ValueError(f"Unknown tool: {tool}")

        try:
            call = parse_tool_call(tool_name, params)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValueError(f"Invalid parameter: {errors}") from e

        logger.info(f"Executing {tool_name.value}")
        return await handler(call, self.context)
