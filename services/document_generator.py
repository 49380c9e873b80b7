"""
Generates the PDF document for an application, choosing template and content
from the application's current state.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from config import Settings
from schemas.application import ApplicationRecord
from services.pdf import PDF_HEADER, HeaderOptions, HeaderRepeat, PageNumbers, PdfDocument, PdfOptions
from services.templates import normalize_base_uri, template_key
from services.view_models import build_view_model

_LOGGER = logging.getLogger(__name__)


class ApplicationLookup(Protocol):
    async def find_by_id(self, application_id: str) -> Optional[ApplicationRecord]: ...


class TemplateProvider(Protocol):
    def get(self, key: str) -> str: ...


class ViewGenerator(Protocol):
    def generate_from_path(self, url: str, view_model: BaseModel) -> str: ...


class PdfGenerator(Protocol):
    def generate_from_html(self, html: str, options: PdfOptions) -> PdfDocument: ...


def document_pdf_options() -> PdfOptions:
    return PdfOptions(
        page_numbers=PageNumbers.NUMERIC,
        header_options=HeaderOptions(
            header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
            header_html=PDF_HEADER,
        ),
    )


class PdfApplicationDocumentGenerator:
    def __init__(
        self,
        repository: ApplicationLookup,
        template_provider: TemplateProvider,
        view_generator: ViewGenerator,
        settings: Settings,
        pdf_generator: PdfGenerator,
        logger: Optional[logging.Logger] = None,
    ):
        required = {
            "repository": repository,
            "template_provider": template_provider,
            "view_generator": view_generator,
            "settings": settings,
            "pdf_generator": pdf_generator,
        }
        missing = [name for name, value in required.items() if value is None]
        if missing:
            raise ValueError(f"Missing required dependencies: {', '.join(missing)}")

        self.repository = repository
        self.template_provider = template_provider
        self.view_generator = view_generator
        self.settings = settings
        self.pdf_generator = pdf_generator
        self.logger = logger or _LOGGER

    async def generate(self, application_id: str, base_uri: str) -> Optional[bytes]:
        """
        Render the application's document as PDF bytes.
        Returns None (after logging a warning) when the application does not exist
        or its state has no document. Collaborator errors propagate unchanged.
        """
        application = await self.repository.find_by_id(application_id)
        if application is None:
            self.logger.warning(
                f"No application found for id '{application_id}'",
                extra={"application_id": application_id},
            )
            return None

        base_uri = normalize_base_uri(base_uri)

        view_model = build_view_model(application, self.settings)
        if view_model is None:
            self.logger.warning(
                f"The application is in state '{application.state}' and no valid document can be generated for it.",
                extra={"application_id": application_id},
            )
            return None

        template_path = self.template_provider.get(template_key(application.state))
        html = self.view_generator.generate_from_path(f"{base_uri}{template_path}", view_model)

        # PDF layout is CPU-bound; keep it off the event loop
        pdf = await run_in_threadpool(self.pdf_generator.generate_from_html, html, document_pdf_options())
        return pdf.to_bytes()
