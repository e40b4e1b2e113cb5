"""
PDF template registry.

Maps versioned template keys ('weekly.v1', 'end_of_term.v1') to the
template classes that lay out a report. A new layout gets a new key so
that existing exports keep their look.
"""

from typing import Any, Callable, Protocol

from reportlab.platypus import Flowable


class ReportTemplate(Protocol):
    """Layout of one report kind."""
    
    def build_story(self, context: dict) -> list[Flowable]:
        """Return the flowables for the report body."""
        ...
    
    def draw_header_footer(self, canvas: Any, doc: Any, context: dict) -> None:
        """Draw the fixed page furniture (header, logo, footer)."""
        ...


TemplateFactory = Callable[[], ReportTemplate]


class TemplateRegistry:
    """Keyed collection of template factories."""
    
    def __init__(self):
        self._factories: dict[str, TemplateFactory] = {}
    
    def register(self, template_key: str, factory: TemplateFactory) -> None:
        """
        Add a template under a versioned key.
        
        Raises:
            ValueError: If the key is already taken
        """
        if template_key in self._factories:
            raise ValueError(f"Report template '{template_key}' is already registered")
        self._factories[template_key] = factory
    
    def get_template(self, template_key: str) -> ReportTemplate:
        """
        Build a fresh template instance for a key.
        
        Raises:
            KeyError: If nothing is registered under the key
        """
        try:
            factory = self._factories[template_key]
        except KeyError:
            raise KeyError(f"Report template '{template_key}' not found") from None
        return factory()
    
    def is_registered(self, template_key: str) -> bool:
        return template_key in self._factories
    
    def list_templates(self) -> list[str]:
        return sorted(self._factories)


# Process-wide registry used by ReportService
_registry = TemplateRegistry()


def register_template(template_key: str, factory: TemplateFactory) -> None:
    _registry.register(template_key, factory)


def get_template(template_key: str) -> ReportTemplate:
    return _registry.get_template(template_key)


def is_registered(template_key: str) -> bool:
    return _registry.is_registered(template_key)


def list_templates() -> list[str]:
    return _registry.list_templates()
