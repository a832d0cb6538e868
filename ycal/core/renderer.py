"""
Template renderer
=================
Renders a CalendarModel through the bundled template ycal/templates/calendar.html.j2.

The template only substitutes variables, loops over lists and branches on
boolean flags already computed by the presenter. No expressions or filters
belong in it.

The template is compiled once per process (load_template is cached) and the
shells call load_template() at start-up so a packaging defect fails fast.
"""

from functools import lru_cache

import jinja2
from markupsafe import Markup

from ycal.core.errors import TemplateError
from ycal.models.schemas import CalendarModel

TEMPLATE_NAME = "calendar.html.j2"

_env = jinja2.Environment(
    loader=jinja2.PackageLoader("ycal", "templates"),
    autoescape=True,
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


@lru_cache(maxsize=1)
def load_template() -> jinja2.Template:
    try:
        return _env.get_template(TEMPLATE_NAME)
    except jinja2.TemplateError as e:
        raise TemplateError(str(e) or type(e).__name__) from e


def render(model: CalendarModel) -> str:
    template = load_template()
    context = model.model_dump()
    # Theme CSS is trusted input from a bundled theme or the caller's own file
    context["theme_css"] = Markup(model.theme_css)
    try:
        return template.render(**context)
    except jinja2.TemplateError as e:
        raise TemplateError(str(e) or type(e).__name__) from e
