"""Jinja2 template engine producing ZPL label documents."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateSyntaxError, UndefinedError

from labelprint.models.label import LabelData
from labelprint.templates.engine import BaseTemplateEngine, TemplateError, load_template_source

# Three 25-dot text lines at x=40, plus an optional Code 128 barcode below them
DEFAULT_ZPL_TEMPLATE = """\
^XA
^FO40,30^A0N,25,25^FD{{ last_name }}, {{ first_name }}^FS
^FO40,55^A0N,25,25^FDDOB: {{ dob }}, {{ gender }}^FS
^FO40,80^A0N,25,25^FDDate: {{ current_datetime }}^FS
{% if barcode_enabled %}^FO40,105^BY3^BCN,70,Y,N,N,A^FD{{ barcode_value }}^FS
{% endif %}^XZ"""


class ZPLTemplateEngine(BaseTemplateEngine):
    """Renders LabelData through a Jinja2 ZPL template.

    The template sees uppercased name and gender fields, the normalized date
    of birth, the captured timestamp, ``barcode_enabled`` and the raw
    ``barcode_value``. Templates loaded from a file can ``{% include %}``
    other files from the same directory.
    """

    def __init__(self, source: str = DEFAULT_ZPL_TEMPLATE, search_path: Path | None = None) -> None:
        self._env = Environment(
            loader=FileSystemLoader(search_path) if search_path is not None else None,
            autoescape=False,  # No HTML escaping for printer commands
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        try:
            self._template = self._env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateError(f"Template syntax error: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "ZPLTemplateEngine":
        """Create an engine from a template file on disk."""
        return cls(load_template_source(path), search_path=path.parent)

    def render(self, label: LabelData) -> bytes:
        """Render the label to ZPL bytes.

        Raises:
            TemplateError: If the template fails at render time.
        """
        try:
            rendered = self._template.render(**label.template_context())
        except UndefinedError as e:
            raise TemplateError(f"Undefined variable in template: {e}") from e
        except Exception as e:
            raise TemplateError(f"Failed to render template: {e}") from e
        return rendered.encode("utf-8")
