from .abstract_factory import TemplateFactory
from ..product.abstract_product import TitleTemplate, PageTemplate, TemplateRenderer
from ..product.concrete_products_jinja import JinjaTitleTemplate, JinjaPageTemplate, JinjaRenderer
from demo_utils.logger import Logger

class JinjaTemplateFactory(TemplateFactory):
    name = "jinja"

    def create_title_template(self) -> TitleTemplate:
        Logger().debug("Creating jinja title template")
        return JinjaTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        Logger().debug("Creating jinja page template")
        return JinjaPageTemplate(title_template = self.create_title_template())

    def get_renderer(self) -> TemplateRenderer:
        Logger().debug("Creating jinja renderer")
        return JinjaRenderer()
