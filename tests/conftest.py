"""Shared fixtures for passage context tests."""

import pytest

from passage_context.config import Settings
from passage_context.context_engine import ContextEngine
from passage_context.engine.cache import InMemoryContentCache
from passage_context.engine.handlers import HandlerContext
from passage_context.services.text_loader import TextLoader

SAMPLE_TEXT = """
The Nellie, a cruising yawl, swung to her anchor without a flutter of the sails.
Marlow sat cross-legged right aft, leaning against the mizzen-mast.
He had sunken cheeks, a yellow complexion, a straight back.
The Director of Companies was our captain and our host.
Kurtz was a remarkable man who collected ivory.
"""


@pytest.fixture
def settings():
    """Settings with the stock budget and window."""
    return Settings(max_context_length=25000, passage_window=1500)


@pytest.fixture
def cache():
    """Fresh cache so tests never share loaded documents."""
    return InMemoryContentCache()


@pytest.fixture
def reference_file(tmp_path):
    """Reference text written to a temporary data folder."""
    path = tmp_path / "heart-of-darkness.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def loader(reference_file):
    return TextLoader(reference_file.parent, reference_file.name)


@pytest.fixture
def handler_ctx(settings, cache, loader):
    return HandlerContext(settings=settings, cache=cache, loader=loader)


@pytest.fixture
def engine(settings, cache, loader):
    return ContextEngine(settings=settings, cache=cache, loader=loader)
