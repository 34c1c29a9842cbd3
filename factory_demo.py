from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Optional
from furniture.client import assemble_room
from furniture.factory.abstract_factory import FurnitureFactory
from furniture.factory.concrete_factory_modern import ModernFurnitureFactory
from furniture.factory.concrete_factory_victorian import VictorianFurnitureFactory
from templating.client import PageClient
from templating.factory.abstract_factory import TemplateFactory
from templating.factory.concrete_factory_jinja import JinjaTemplateFactory
from templating.factory.concrete_factory_plain import PlainTemplateFactory
from templating.product.abstract_product import TemplateRenderError
from demo_utils.config import AppConfig
from demo_utils.logger import Logger
import sys

TEMPLATE_FACTORIES: Dict[str, Callable[[], TemplateFactory]] = {
    "jinja": JinjaTemplateFactory,
    "plain": PlainTemplateFactory,
}

FURNITURE_FACTORIES: Dict[str, Callable[[], FurnitureFactory]] = {
    "modern": ModernFurnitureFactory,
    "victorian": VictorianFurnitureFactory,
}


def choose_template_factory(name: str) -> "TemplateFactory":
    key = name.strip().lower()
    if key not in TEMPLATE_FACTORIES:
        Logger().error("Template engine not supported: %s", name)
        raise ValueError(f"Unknown template engine: {name!r}")
    return TEMPLATE_FACTORIES[key]()


def choose_furniture_factory(name: str) -> "FurnitureFactory":
    key = name.strip().lower()
    if key not in FURNITURE_FACTORIES:
        Logger().error("Furniture style not supported: %s", name)
        raise ValueError(f"Unknown furniture style: {name!r}")
    return FURNITURE_FACTORIES[key]()


def main(config_path: Optional[Path] = None) -> int:
    config = AppConfig(config_path)
    Logger().configure(level=config.log_level(), to_file=config.log_to_file(), log_dir=config.log_dir())
    Logger().debug("Loaded settings from %s", config.path())

    # ── Furniture ─────────────────────────────────────────────
    for style in config.furniture_styles():
        factory = choose_furniture_factory(style)
        print(f"=== {factory.name.capitalize()} style ===")
        assemble_room(factory)
        print()

    # ── Page templates ────────────────────────────────────────
    client = PageClient(config.page_title(), config.page_content())
    for engine in config.template_engines():
        factory = choose_template_factory(engine)
        print(f"=== {factory.name.capitalize()} templates ===")
        try:
            print(client.render(factory))
        except TemplateRenderError as e:
            Logger().error("Could not render page: %s", e)
        print()

    return 0


def run() -> None:
    try:
        code = main()
    except Exception as e:
        Logger().critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    run()
