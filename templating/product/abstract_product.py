from abc import ABC, abstractmethod
from typing import Dict, Optional

# --- Abstract Products ---

class TitleTemplate(ABC):
    style: str = ""

    @abstractmethod
    def get_template_string(self) -> str: ...


class PageTemplate(ABC):
    """A page wraps the markup of the title template it was built with."""
    style: str = ""

    def __init__(self, title_template: TitleTemplate):
        self.__title_template = title_template

    def title_template(self) -> TitleTemplate:
        return self.__title_template

    @abstractmethod
    def get_template_string(self) -> str: ...


class TemplateRenderer(ABC):
    style: str = ""

    @abstractmethod
    def render(self, template_string: str, arguments: Dict[str, str]) -> str: ...


class TemplateRenderError(ValueError):
    """Raised when a template cannot be rendered with the given arguments."""

    def __init__(self, style: str, message: str, key: Optional[str] = None):
        super().__init__(f"[{style}] {message}")
        self.style = style
        self.key = key
