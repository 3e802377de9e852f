"""Collaborator contracts consumed by the document generator.

Infrastructure adapters (SQLAlchemy, Jinja2, WeasyPrint) implement these.
"""

import uuid
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Optional, Protocol

from application_docs.domain.models import Application, PdfDocument, PdfOptions


class ApplicationRepository(ABC):
    """Resolves applications by identifier."""

    @abstractmethod
    def find_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """Return the application, or None when no record matches."""
        ...


class TemplateResolver(ABC):
    """Maps a logical template name to a path fragment."""

    @abstractmethod
    def resolve(self, logical_name: str) -> str:
        ...


class ViewRenderer(ABC):
    """Renders a template located at ``uri`` with a view model."""

    @abstractmethod
    def render(self, uri: str, view_model: Any) -> str:
        """Return the rendered HTML."""
        ...


class DocumentSettings(Protocol):
    """Configuration values read while building view models."""

    support_email: str
    signature: str
    tax_rate: Decimal


class PdfRenderer(ABC):
    """Converts HTML to a PDF document."""

    @abstractmethod
    def render(self, html: str, options: PdfOptions) -> PdfDocument:
        ...
