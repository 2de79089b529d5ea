"""Abstract base class for template engines."""

from abc import ABC, abstractmethod
from pathlib import Path

from labelprint.models.label import LabelData


class BaseTemplateEngine(ABC):
    """Abstract base class for template engines."""

    @abstractmethod
    def render(self, label: LabelData) -> bytes:
        """Render a label into printer commands.

        Args:
            label: The validated label fields.

        Returns:
            Rendered printer commands as bytes.

        Raises:
            TemplateError: If rendering fails.
        """
        pass


class TemplateError(Exception):
    """Exception raised for template loading and rendering errors."""

    pass


def load_template_source(path: Path) -> str:
    """Read a template file from disk.

    Raises:
        TemplateError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Cannot read template {path}: {e}") from e
