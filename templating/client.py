from typing import Dict
from templating.factory.abstract_factory import TemplateFactory
from demo_utils.logger import Logger


class PageClient:
    """Renders one page through whichever TemplateFactory it is handed."""

    def __init__(self, title: str, content: str) -> None:
        self.__title = title
        self.__content = content

    def arguments(self) -> Dict[str, str]:
        return {"title": self.__title, "content": self.__content}

    def render(self, factory: "TemplateFactory") -> str:
        # Template and renderer come from the same factory so their syntax always matches
        page_template = factory.create_page_template()
        renderer = factory.get_renderer()
        html = renderer.render(page_template.get_template_string(), self.arguments())
        Logger().info("Rendered page with %s templates", factory.name)
        return html
