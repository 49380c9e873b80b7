"""
Tests for PDF document generation orchestration, using in-memory collaborators.
Run from project root: python -m pytest tests/test_document_generator.py -v
"""
import logging
import threading
import unittest
from datetime import date
from decimal import Decimal

from config import Settings
from schemas.application import ApplicationRecord, PersonSchema, ReviewSchema
from schemas.view_models import PendingApplicationViewModel
from services.document_generator import PdfApplicationDocumentGenerator
from services.pdf import PDF_HEADER, HeaderRepeat, PageNumbers, PdfDocument


class FakeRepository:
    def __init__(self, *applications):
        self.applications = {a.id: a for a in applications}
        self.calls = []

    async def find_by_id(self, application_id):
        self.calls.append(application_id)
        return self.applications.get(application_id)


class FakeTemplateProvider:
    def __init__(self):
        self.keys = []

    def get(self, key):
        self.keys.append(key)
        return f"/views/{key}.html"


class FakeViewGenerator:
    def __init__(self):
        self.calls = []

    def generate_from_path(self, url, view_model):
        self.calls.append((url, view_model))
        return f"<html><body>{view_model.reference_number}</body></html>"


class FakePdfGenerator:
    def __init__(self):
        self.calls = []
        self.threads = []

    def generate_from_html(self, html, options):
        self.calls.append((html, options))
        self.threads.append(threading.get_ident())
        return PdfDocument(content=b"%PDF-1.7 " + html.encode())


class BrokenViewGenerator:
    def generate_from_path(self, url, view_model):
        raise RuntimeError("template engine down")


def _application(application_id="A1", state="Pending", **overrides):
    data = {
        "id": application_id,
        "state": state,
        "reference_number": f"REF-{application_id}",
        "applied_on": date(2026, 9, 1),
        "person": PersonSchema(first_name="Jane", surname="Doe"),
        "current_review": ReviewSchema(reason="address mismatch") if state == "InReview" else None,
    }
    data.update(overrides)
    return ApplicationRecord(**data)


def _settings():
    return Settings(support_email="help@example.com", signature="Client Services", tax_rate=Decimal("0.85"))


class TestDocumentGenerator(unittest.IsolatedAsyncioTestCase):
    def _generator(self, *applications, view_generator=None):
        self.repository = FakeRepository(*applications)
        self.templates = FakeTemplateProvider()
        self.views = view_generator or FakeViewGenerator()
        self.pdfs = FakePdfGenerator()
        self.logger = logging.getLogger("tests.document_generator")
        return PdfApplicationDocumentGenerator(
            repository=self.repository,
            template_provider=self.templates,
            view_generator=self.views,
            settings=_settings(),
            pdf_generator=self.pdfs,
            logger=self.logger,
        )

    async def test_known_states_produce_bytes(self):
        """Each renderable state resolves '<State>Application' and returns the PDF bytes."""
        for state in ("Pending", "Activated", "InReview"):
            with self.subTest(state=state):
                generator = self._generator(_application(state=state))
                content = await generator.generate("A1", "https://host")
                self.assertIsInstance(content, bytes)
                self.assertTrue(content)
                self.assertEqual(self.templates.keys, [f"{state}Application"])

    async def test_pending_example(self):
        generator = self._generator(_application("A1", "Pending"))
        content = await generator.generate("A1", "https://host/")

        self.assertEqual(self.templates.keys, ["PendingApplication"])
        url, view_model = self.views.calls[0]
        self.assertEqual(url, "https://host/views/PendingApplication.html")
        self.assertIsInstance(view_model, PendingApplicationViewModel)
        html, _ = self.pdfs.calls[0]
        self.assertEqual(content, b"%PDF-1.7 " + html.encode())

    async def test_trailing_separator_does_not_change_url(self):
        generator = self._generator(_application())
        await generator.generate("A1", "https://host/app/")
        await generator.generate("A1", "https://host/app")
        urls = [url for url, _ in self.views.calls]
        self.assertEqual(urls[0], urls[1])
        self.assertEqual(urls[0], "https://host/app/views/PendingApplication.html")

    async def test_fixed_pdf_options(self):
        generator = self._generator(_application(state="Activated"))
        await generator.generate("A1", "https://host")
        _, options = self.pdfs.calls[0]
        self.assertEqual(options.page_numbers, PageNumbers.NUMERIC)
        self.assertEqual(options.header_options.header_repeat, HeaderRepeat.FIRST_PAGE_ONLY)
        self.assertEqual(options.header_options.header_html, PDF_HEADER)

    async def test_unknown_application_returns_none_with_one_warning(self):
        generator = self._generator(_application("A1"))
        with self.assertLogs(self.logger, level="WARNING") as logs:
            content = await generator.generate("missing", "https://host")
        self.assertIsNone(content)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("No application found for id 'missing'", logs.output[0])
        self.assertEqual(self.templates.keys, [])
        self.assertEqual(self.pdfs.calls, [])

    async def test_unsupported_state_returns_none_with_one_warning(self):
        generator = self._generator(_application("A1", "Closed"))
        with self.assertLogs(self.logger, level="WARNING") as logs:
            content = await generator.generate("A1", "https://host")
        self.assertIsNone(content)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("'Closed'", logs.output[0])
        self.assertEqual(self.templates.keys, [])
        self.assertEqual(self.views.calls, [])
        self.assertEqual(self.pdfs.calls, [])

    async def test_pdf_rendering_runs_off_the_event_loop_thread(self):
        generator = self._generator(_application())
        await generator.generate("A1", "https://host")
        self.assertEqual(len(self.pdfs.threads), 1)
        self.assertNotEqual(self.pdfs.threads[0], threading.get_ident())

    async def test_collaborator_errors_propagate(self):
        generator = self._generator(_application(), view_generator=BrokenViewGenerator())
        with self.assertRaises(RuntimeError):
            await generator.generate("A1", "https://host")
        self.assertEqual(self.pdfs.calls, [])


class TestDocumentGeneratorConstruction(unittest.TestCase):
    def test_rejects_missing_dependencies(self):
        with self.assertRaises(ValueError) as ctx:
            PdfApplicationDocumentGenerator(
                repository=None,
                template_provider=FakeTemplateProvider(),
                view_generator=FakeViewGenerator(),
                settings=_settings(),
                pdf_generator=None,
            )
        self.assertIn("repository", str(ctx.exception))
        self.assertIn("pdf_generator", str(ctx.exception))

    def test_accepts_all_dependencies_and_defaults_logger(self):
        generator = PdfApplicationDocumentGenerator(
            repository=FakeRepository(),
            template_provider=FakeTemplateProvider(),
            view_generator=FakeViewGenerator(),
            settings=_settings(),
            pdf_generator=FakePdfGenerator(),
        )
        self.assertEqual(generator.logger.name, "services.document_generator")


if __name__ == "__main__":
    unittest.main()
