"""Tool dispatch and validation tests."""

import pytest

from passage_context.context_engine import HANDLERS, ContextEngine
from passage_context.models import HeartOfDarknessCall, PassageQueryCall, ToolName, parse_tool_call


def test_every_tool_has_a_handler():
    assert set(HANDLERS) == set(ToolName)


def test_parse_tool_call_picks_variant():
    call = parse_tool_call(ToolName.HEART_OF_DARKNESS, {"question": "Who was Kurtz?"})
    assert isinstance(call, HeartOfDarknessCall)

    call = parse_tool_call("passage_query", {"question": "river", "window_radius": 200})
    assert isinstance(call, PassageQueryCall)
    assert call.window_radius == 200
    assert call.max_budget is None


async def test_execute_heart_of_darkness(engine):
    result = await engine.execute("heart_of_darkness", {"question": "Who was Kurtz?"})
    assert "Kurtz" in result.data["context"]


async def test_unknown_tool(engine):
    with pytest.raises(ValueError, match="Unknown tool: summarize"):
        await engine.execute("summarize", {"question": "x"})


async def test_missing_question_is_invalid(engine):
    with pytest.raises(ValueError, match="Invalid parameter"):
        await engine.execute(ToolName.HEART_OF_DARKNESS, {})


async def test_out_of_range_budget_is_invalid(engine):
    with pytest.raises(ValueError, match="Invalid parameter"):
        await engine.execute(ToolName.PASSAGE_QUERY, {"question": "river", "max_budget": 5})


def test_loader_built_from_settings(settings, cache):
    engine = ContextEngine(settings=settings, cache=cache)
    assert engine.loader.file_name == settings.reference_text_file
    assert engine.loader.file_path.endswith(settings.reference_text_file)
