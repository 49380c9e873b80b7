from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from services.document_generator import PdfApplicationDocumentGenerator
from services.pdf import WeasyPrintPdfGenerator
from services.repository import ApplicationRepository
from services.templates import Jinja2ViewGenerator, TemplatePathProvider

router = APIRouter(prefix="/api/applications", tags=["documents"])

MSG_DOCUMENT_NOT_AVAILABLE = "Document not available"


def get_document_generator(db: AsyncSession = Depends(get_db)) -> PdfApplicationDocumentGenerator:
    return PdfApplicationDocumentGenerator(
        repository=ApplicationRepository(db),
        template_provider=TemplatePathProvider(settings.template_url_prefix),
        view_generator=Jinja2ViewGenerator(settings.template_dir, settings.template_url_prefix),
        settings=settings,
        pdf_generator=WeasyPrintPdfGenerator(),
    )


@router.get("/{application_id}/document")
async def get_application_document(
    application_id: str,
    request: Request,
    generator: PdfApplicationDocumentGenerator = Depends(get_document_generator),
):
    base_uri = settings.document_base_uri or str(request.base_url)
    content = await generator.generate(application_id, base_uri)
    if content is None:
        # Unknown id or a state without a document; the generator has already logged which
        raise HTTPException(status_code=404, detail=MSG_DOCUMENT_NOT_AVAILABLE)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{application_id}.pdf"'},
    )
