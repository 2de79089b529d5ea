"""Template engines for Labelprint."""

from labelprint.templates.engine import BaseTemplateEngine, TemplateError
from labelprint.templates.zpl import DEFAULT_ZPL_TEMPLATE, ZPLTemplateEngine

__all__ = ["BaseTemplateEngine", "DEFAULT_ZPL_TEMPLATE", "TemplateError", "ZPLTemplateEngine"]
