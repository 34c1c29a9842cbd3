from abc import ABC, abstractmethod
from ..product.abstract_product import TitleTemplate, PageTemplate, TemplateRenderer
# ──────────────────────────────────────────────────────────────
# Abstract Factory
# ──────────────────────────────────────────────────────────────

class TemplateFactory(ABC):
    name: str = ""

    @abstractmethod
    def create_title_template(self) -> TitleTemplate: ...

    @abstractmethod
    def create_page_template(self) -> PageTemplate: ...

    @abstractmethod
    def get_renderer(self) -> TemplateRenderer: ...
