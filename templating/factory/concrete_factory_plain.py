from .abstract_factory import TemplateFactory
from ..product.abstract_product import TitleTemplate, PageTemplate, TemplateRenderer
from ..product.concrete_products_plain import PlainTitleTemplate, PlainPageTemplate, PlainRenderer
from demo_utils.logger import Logger

class PlainTemplateFactory(TemplateFactory):
    name = "plain"

    def create_title_template(self) -> TitleTemplate:
        Logger().debug("Creating plain title template")
        return PlainTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        Logger().debug("Creating plain page template")
        return PlainPageTemplate(title_template = self.create_title_template())

    def get_renderer(self) -> TemplateRenderer:
        Logger().debug("Creating plain renderer")
        return PlainRenderer()
