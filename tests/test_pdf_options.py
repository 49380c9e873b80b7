"""
Tests for the translation of PDF layout options into CSS and header markup.
These do not invoke WeasyPrint itself.
Run from project root: python -m pytest tests/test_pdf_options.py -v
"""
import unittest

from services.document_generator import document_pdf_options
from services.pdf import (
    PDF_HEADER,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfDocument,
    PdfOptions,
    page_css,
    with_header,
)


class TestPageCss(unittest.TestCase):
    def test_document_options_number_pages_and_header_first_page(self):
        css = page_css(document_pdf_options())
        self.assertIn("counter(page, decimal)", css)
        self.assertIn("@page :first { @top-center { content: element(pdfHeader); } }", css)

    def test_header_on_all_pages(self):
        options = PdfOptions(
            header_options=HeaderOptions(header_repeat=HeaderRepeat.ALL_PAGES, header_html="<p>H</p>")
        )
        css = page_css(options)
        self.assertIn("@page { @top-center { content: element(pdfHeader); } }", css)
        self.assertNotIn(":first", css)
        self.assertNotIn("counter(page", css)

    def test_roman_numbering(self):
        self.assertIn("lower-roman", page_css(PdfOptions(page_numbers=PageNumbers.ROMAN)))

    def test_no_options_no_css(self):
        self.assertEqual(page_css(PdfOptions()), "")


class TestWithHeader(unittest.TestCase):
    def test_inserted_after_body_tag(self):
        html = '<html><body class="doc"><p>x</p></body></html>'
        out = with_header(html, document_pdf_options())
        self.assertTrue(out.startswith('<html><body class="doc"><div class="pdf-running-header">'))
        self.assertIn(PDF_HEADER, out)
        self.assertTrue(out.endswith("<p>x</p></body></html>"))

    def test_prepended_without_body_tag(self):
        out = with_header("<p>x</p>", document_pdf_options())
        self.assertTrue(out.startswith('<div class="pdf-running-header">'))
        self.assertTrue(out.endswith("<p>x</p>"))

    def test_unchanged_without_header(self):
        self.assertEqual(with_header("<p>x</p>", PdfOptions()), "<p>x</p>")


class TestPdfDocument(unittest.TestCase):
    def test_to_bytes(self):
        self.assertEqual(PdfDocument(content=b"%PDF").to_bytes(), b"%PDF")


if __name__ == "__main__":
    unittest.main()
