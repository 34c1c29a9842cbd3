"""
Pytest configuration and shared fixtures for the abstract factory demos.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from furniture.factory.concrete_factory_modern import ModernFurnitureFactory
from furniture.factory.concrete_factory_victorian import VictorianFurnitureFactory
from templating.factory.concrete_factory_jinja import JinjaTemplateFactory
from templating.factory.concrete_factory_plain import PlainTemplateFactory
from demo_utils.logger import Logger
from demo_utils.pattern import Singleton

PAGE_TITLE = "Página de exemplo"
PAGE_CONTENT = "Este é o corpo do conteúdo."


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the shared logger at its defaults between tests."""
    Logger().configure(level="error")
    yield
    Logger().configure(level="error")


@pytest.fixture
def fresh_logger():
    """Drop the cached Logger so the next Logger() call builds a new one."""
    Singleton._instance.pop(Logger, None)
    yield
    Logger().configure(level="error")


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def log_messages():
    """Debug-level messages written to the shared logger during the test."""
    Logger().configure(level="debug", to_screen=False)
    handler = RecordingHandler()
    Logger().addHandler(handler)
    yield handler.messages
    Logger().removeHandler(handler)


@pytest.fixture(params=[JinjaTemplateFactory, PlainTemplateFactory], ids=["jinja", "plain"])
def template_factory(request):
    """Every concrete template factory."""
    return request.param()


@pytest.fixture(params=[ModernFurnitureFactory, VictorianFurnitureFactory], ids=["modern", "victorian"])
def furniture_factory(request):
    """Every concrete furniture factory."""
    return request.param()


@pytest.fixture
def page_arguments():
    return {"title": PAGE_TITLE, "content": PAGE_CONTENT}


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
