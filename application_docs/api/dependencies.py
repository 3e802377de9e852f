"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from application_docs.config import settings
from application_docs.domain.generator import DocumentGenerator
from application_docs.domain.ports import PdfRenderer, TemplateResolver, ViewRenderer
from application_docs.infrastructure.database.repositories import ApplicationRepository
from application_docs.infrastructure.database.session import get_db
from application_docs.infrastructure.rendering.pdf import WeasyPrintPdfRenderer
from application_docs.infrastructure.rendering.templates import JinjaViewRenderer, TemplatePathProvider


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_template_resolver() -> TemplateResolver:
    """Provide template path lookup from settings"""
    return TemplatePathProvider(settings.template_paths)


def get_view_renderer() -> ViewRenderer:
    """Provide Jinja2 view renderer"""
    return JinjaViewRenderer()


def get_pdf_renderer() -> PdfRenderer:
    """Provide WeasyPrint PDF renderer"""
    return WeasyPrintPdfRenderer()


def get_document_generator(
    db: Session = Depends(get_db),
    template_resolver: TemplateResolver = Depends(get_template_resolver),
    view_renderer: ViewRenderer = Depends(get_view_renderer),
    pdf_renderer: PdfRenderer = Depends(get_pdf_renderer),
) -> DocumentGenerator:
    """Provide a per-request document generator"""
    return DocumentGenerator(
        repository=ApplicationRepository(db),
        template_resolver=template_resolver,
        view_renderer=view_renderer,
        pdf_renderer=pdf_renderer,
        settings=settings,
    )
