"""GET /v1/applications/{application_id}/document - Render application PDF"""

import time
import uuid
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from starlette.responses import Response

from application_docs.api.dependencies import get_document_generator, get_request_id
from application_docs.config import settings
from application_docs.domain.generator import DocumentGenerator, normalize_base_uri
from application_docs.infrastructure.observability.logging import log_document_generated
from application_docs.infrastructure.observability.metrics import record_generation

router = APIRouter()


def resolve_base_uri(requested: Optional[str]) -> str:
    """
    Template base URI for a request.

    Only the configured default and the configured allow-list are accepted;
    anything else is rejected with 400.
    """
    if requested is None:
        return settings.template_base_uri

    allowed = [settings.template_base_uri, *settings.allowed_template_base_uris]
    if normalize_base_uri(requested) not in {normalize_base_uri(uri) for uri in allowed}:
        raise HTTPException(status_code=400, detail="Template base URI not allowed")
    return requested


@router.get("/applications/{application_id}/document")
def get_application_document(
    application_id: str,
    request: Request,
    base_uri: Optional[str] = Query(None, description="Allow-listed template base URI (defaults to packaged templates)"),
    generator: DocumentGenerator = Depends(get_document_generator),
):
    """
    Render the PDF document for an application's current state.

    Returns:
        application/pdf body, or 404 when no document could be produced
        (unknown application, unsupported state, or rendering failure)
    """
    try:
        application_uuid = uuid.UUID(application_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid application ID format")

    template_base_uri = resolve_base_uri(base_uri)

    start_time = time.time()
    result = generator.try_generate(application_uuid, template_base_uri)
    duration = time.time() - start_time
    record_generation(result, duration)

    if not result.ok:
        raise HTTPException(status_code=404, detail="Document not available")

    log_document_generated(
        get_request_id(request),
        str(application_uuid),
        str(result.state),
        len(result.document),
        duration * 1000,
    )

    return Response(
        content=result.document,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="application-{application_uuid}.pdf"'},
    )
