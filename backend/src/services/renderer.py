"""Renders the dashboard view model into an HTML fragment."""
import logging

from jinja2 import (
    Environment,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from core.exceptions import RenderError
from schemas.dashboard import DashboardView


logger = logging.getLogger(__name__)

DASHBOARD_TEMPLATE = "dashboard.html"


class DashboardRenderer:
    """
    Jinja2 renderer for the dashboard fragment.

    The template is parsed when the renderer is created, so a broken template
    fails application startup instead of the first request.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self._environment = environment or Environment(
            loader=PackageLoader("api", "templates"),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._template: Template = self._environment.get_template(DASHBOARD_TEMPLATE)

    def render(self, view: DashboardView) -> str:
        """Render the full dashboard fragment. Raises RenderError on template failure."""
        try:
            return self._template.render(categories=view.categories)
        except TemplateError as e:
            raise RenderError(f"Failed to render {DASHBOARD_TEMPLATE}") from e
