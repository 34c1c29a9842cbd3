from .abstract_product import TitleTemplate, PageTemplate, TemplateRenderer, TemplateRenderError
from typing import Dict
from jinja2 import StrictUndefined, TemplateError, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment

STYLE = "jinja"

# --- Concrete Products for Jinja (Twig-compatible syntax) ---

class JinjaTitleTemplate(TitleTemplate):
    style = STYLE

    def get_template_string(self) -> str:
        return "<h1>{{ title }}</h1>"


class JinjaPageTemplate(PageTemplate):
    style = STYLE

    def get_template_string(self) -> str:
        rendered_title = self.title_template().get_template_string()
        return (
            '<div class="page">'
            f"{rendered_title}"
            '<article class="content">{{ content }}</article>'
            "</div>"
        )


class JinjaRenderer(TemplateRenderer):
    """Renders through a sandboxed Jinja2 environment; values are HTML-escaped."""
    style = STYLE

    def __init__(self):
        self.__env = SandboxedEnvironment(undefined=StrictUndefined, autoescape=True)

    def render(self, template_string: str, arguments: Dict[str, str]) -> str:
        try:
            return self.__env.from_string(template_string).render(**arguments)
        except UndefinedError as e:
            raise TemplateRenderError(self.style, f"Unknown substitution key: {e.message}") from e
        except TemplateSyntaxError as e:
            raise TemplateRenderError(self.style, f"Bad template at line {e.lineno}: {e.message}") from e
        except TemplateError as e:
            # sandbox violations, missing includes and other engine failures
            raise TemplateRenderError(self.style, f"Template failed: {e}") from e
        except (TypeError, ArithmeticError) as e:
            raise TemplateRenderError(self.style, f"Template expression failed: {e}") from e
