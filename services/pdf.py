"""
HTML to PDF rendering.

Layout options (page numbering, first-page header) are translated into CSS
@page rules and handed to WeasyPrint together with the rendered HTML.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel

PDF_HEADER = (
    '<div class="document-header">'
    '<span class="document-header__brand">Client Services</span>'
    '<span class="document-header__title">Application Summary</span>'
    "</div>"
)


class PageNumbers(str, Enum):
    NONE = "none"
    NUMERIC = "numeric"
    ROMAN = "roman"


class HeaderRepeat(str, Enum):
    FIRST_PAGE_ONLY = "first_page_only"
    ALL_PAGES = "all_pages"


class HeaderOptions(BaseModel):
    header_repeat: HeaderRepeat = HeaderRepeat.FIRST_PAGE_ONLY
    header_html: str = ""


class PdfOptions(BaseModel):
    page_numbers: PageNumbers = PageNumbers.NONE
    header_options: Optional[HeaderOptions] = None


class PdfDocument(BaseModel):
    content: bytes

    def to_bytes(self) -> bytes:
        return self.content


_COUNTER_STYLES = {
    PageNumbers.NUMERIC: "decimal",
    PageNumbers.ROMAN: "lower-roman",
}

_BODY_OPEN = re.compile(r"<body[^>]*>", re.IGNORECASE)


def page_css(options: PdfOptions) -> str:
    """CSS @page rules for the requested numbering and header placement."""
    rules: list[str] = []
    counter_style = _COUNTER_STYLES.get(options.page_numbers)
    if counter_style:
        rules.append(
            "@page { @bottom-center { content: counter(page, %s); font-size: 9pt; } }" % counter_style
        )
    header = options.header_options
    if header and header.header_html:
        rules.append(".pdf-running-header { position: running(pdfHeader); }")
        selector = "@page :first" if header.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY else "@page"
        rules.append(selector + " { @top-center { content: element(pdfHeader); } }")
    return "\n".join(rules)


def with_header(html: str, options: PdfOptions) -> str:
    """Place the header markup at the start of <body> so it can be lifted into the page margin."""
    header = options.header_options
    if not header or not header.header_html:
        return html
    block = f'<div class="pdf-running-header">{header.header_html}</div>'
    match = _BODY_OPEN.search(html)
    if match is None:
        return block + html
    return html[: match.end()] + block + html[match.end():]


class WeasyPrintPdfGenerator:
    def __init__(self, base_url: Optional[str] = None):
        # Resolves relative stylesheet and image links in the rendered HTML
        self.base_url = base_url

    def generate_from_html(self, html: str, options: PdfOptions) -> PdfDocument:
        # Lazy import: WeasyPrint pulls in native Pango/Cairo libraries
        from weasyprint import CSS, HTML

        document = HTML(string=with_header(html, options), base_url=self.base_url)
        stylesheets = []
        css = page_css(options)
        if css:
            stylesheets.append(CSS(string=css))
        return PdfDocument(content=document.write_pdf(stylesheets=stylesheets))
