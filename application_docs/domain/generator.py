"""State-dependent PDF document generation for applications"""

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from application_docs.domain.exceptions import MissingReviewError
from application_docs.domain.models import (
    Application,
    ApplicationState,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
)
from application_docs.domain.ports import (
    ApplicationRepository,
    DocumentSettings,
    PdfRenderer,
    TemplateResolver,
    ViewRenderer,
)
from application_docs.domain.view_models import STATE_VIEWS

DOCUMENT_HEADER_HTML = (
    '<table class="document-header" width="100%"><tr>'
    '<td class="document-header__title">Application Confirmation</td>'
    '<td class="document-header__notice">Private and confidential</td>'
    "</tr></table>"
)


class FailureReason(str, Enum):
    """Why no document was produced"""

    NOT_FOUND = "not_found"
    LOOKUP_FAILURE = "lookup_failure"
    UNSUPPORTED_STATE = "unsupported_state"
    PRECONDITION_VIOLATION = "precondition_violation"
    RENDERING_FAILURE = "rendering_failure"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call: a document or the reason there is none"""

    document: Optional[bytes] = None
    failure: Optional[FailureReason] = None
    state: Optional[ApplicationState] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def document_pdf_options() -> PdfOptions:
    """Fixed layout: numeric page numbers, header on the first page only"""
    return PdfOptions(
        page_numbers=PageNumbers.NUMERIC,
        header_options=HeaderOptions(
            header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
            header_html=DOCUMENT_HEADER_HTML,
        ),
    )


def normalize_base_uri(base_uri: str) -> str:
    """Strip a single trailing '/'"""
    if base_uri.endswith("/"):
        return base_uri[:-1]
    return base_uri


class DocumentGenerator:
    """
    Renders the PDF document matching an application's state.

    Every failure is logged as a single warning and reported to the caller
    as a missing document.
    """

    def __init__(
        self,
        repository: ApplicationRepository,
        template_resolver: TemplateResolver,
        view_renderer: ViewRenderer,
        pdf_renderer: PdfRenderer,
        settings: DocumentSettings,
        logger: Optional[logging.Logger] = None,
    ):
        for name, dependency in (
            ("repository", repository),
            ("template_resolver", template_resolver),
            ("view_renderer", view_renderer),
            ("pdf_renderer", pdf_renderer),
            ("settings", settings),
        ):
            if dependency is None:
                raise ValueError(f"{name} is required")

        self.repository = repository
        self.template_resolver = template_resolver
        self.view_renderer = view_renderer
        self.pdf_renderer = pdf_renderer
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, application_id: uuid.UUID, base_uri: str) -> Optional[bytes]:
        """Return the PDF bytes, or None when no document can be produced"""
        return self.try_generate(application_id, base_uri).document

    def try_generate(self, application_id: uuid.UUID, base_uri: str) -> GenerationResult:
        """
        Generate the document and report why it failed, if it did.

        Flow:
        1. Look up the application
        2. Strip one trailing '/' from the base URI
        3. Pick the view for the application's state
        4. Render the view to HTML, then HTML to PDF
        """
        extra = {"application_id": str(application_id)}

        try:
            application = self.repository.find_by_id(application_id)
        except Exception as e:
            return self._fail(FailureReason.LOOKUP_FAILURE, f"Application lookup failed: {e}", extra)

        if application is None:
            return self._fail(FailureReason.NOT_FOUND, f"No application found for id '{application_id}'", extra)

        state = None
        try:
            state = application.state
            if state not in STATE_VIEWS:
                return self._fail(
                    FailureReason.UNSUPPORTED_STATE,
                    f"The application is in state '{state}' and no valid document can be generated for it.",
                    extra,
                    state,
                )

            html = self._render_view(application, normalize_base_uri(base_uri))
            pdf = self.pdf_renderer.render(html, document_pdf_options())
            return GenerationResult(document=pdf.to_bytes(), state=state)
        except MissingReviewError as e:
            return self._fail(FailureReason.PRECONDITION_VIOLATION, f"Precondition violated: {e}", extra, state)
        except Exception as e:
            return self._fail(FailureReason.RENDERING_FAILURE, f"Error occurred while rendering document: {e}", extra, state)

    def _render_view(self, application: Application, base_uri: str) -> str:
        state_view = STATE_VIEWS[application.state]
        path = self.template_resolver.resolve(state_view.template_name)
        view_model = state_view.build(application, self.settings)
        return self.view_renderer.render(f"{base_uri}{path}", view_model)

    def _fail(
        self,
        reason: FailureReason,
        message: str,
        extra: dict,
        state: Optional[ApplicationState] = None,
    ) -> GenerationResult:
        if state is not None:
            extra = {**extra, "state": str(state)}
        self.logger.warning(message, extra={**extra, "failure_reason": reason.value})
        return GenerationResult(failure=reason, state=state)
