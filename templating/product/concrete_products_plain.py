from .abstract_product import TitleTemplate, PageTemplate, TemplateRenderer, TemplateRenderError
from string import Template
from typing import Dict
from markupsafe import escape

STYLE = "plain"

# --- Concrete Products for plain $placeholder templates ---

class PlainTitleTemplate(TitleTemplate):
    style = STYLE

    def get_template_string(self) -> str:
        return "<h1>$title</h1>"


class PlainPageTemplate(PageTemplate):
    style = STYLE

    def get_template_string(self) -> str:
        rendered_title = self.title_template().get_template_string()
        return (
            '<div class="page">'
            f"{rendered_title}"
            '<article class="content">$content</article>'
            "</div>"
        )


class PlainRenderer(TemplateRenderer):
    """
    Token substitution with string.Template. Only $name / ${name} placeholders
    are understood; nothing in the template is evaluated.
    """
    style = STYLE

    def render(self, template_string: str, arguments: Dict[str, str]) -> str:
        values = {key: escape(value) for key, value in arguments.items()}
        try:
            return Template(template_string).substitute(values)
        except KeyError as e:
            key = e.args[0]
            raise TemplateRenderError(self.style, f"Unknown substitution key: {key!r}", key=key) from e
        except ValueError as e:
            raise TemplateRenderError(self.style, f"Bad template: {e}") from e
