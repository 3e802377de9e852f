"""HTML to PDF conversion with WeasyPrint"""

import re

from application_docs.domain.exceptions import PdfRenderingError
from application_docs.domain.models import HeaderRepeat, PageNumbers, PdfDocument, PdfOptions
from application_docs.domain.ports import PdfRenderer

_BODY_OPEN = re.compile(r"<body[^>]*>", re.IGNORECASE)

_COUNTER_STYLES = {
    PageNumbers.NUMERIC: "decimal",
    PageNumbers.ROMAN: "lower-roman",
}


def build_page_css(options: PdfOptions) -> str:
    """@page rules for page numbers and the running header"""
    rules = [".pdf-running-header { position: running(pdf-header); }"]

    counter_style = _COUNTER_STYLES.get(options.page_numbers)
    if counter_style:
        rules.append(f"@page {{ @bottom-center {{ content: counter(page, {counter_style}); }} }}")

    selector = "@page :first" if options.header_options.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY else "@page"
    rules.append(f"{selector} {{ @top-center {{ content: element(pdf-header); width: 100%; }} }}")

    return "\n".join(rules)


def inject_header(html: str, header_html: str) -> str:
    """Place the header markup first in <body> so it can run into the page margin"""
    header = f'<div class="pdf-running-header">{header_html}</div>'
    match = _BODY_OPEN.search(html)
    if match is None:
        return header + html
    return html[: match.end()] + header + html[match.end():]


def _write_pdf(html: str, css: str, base_url: str | None) -> bytes:
    # Lazy import: WeasyPrint loads Pango/HarfBuzz native libraries on import
    from weasyprint import CSS, HTML

    return HTML(string=html, base_url=base_url).write_pdf(stylesheets=[CSS(string=css)])


class WeasyPrintPdfRenderer(PdfRenderer):
    """Renders HTML strings to PDF documents"""

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url

    def render(self, html: str, options: PdfOptions) -> PdfDocument:
        """
        Raises:
            PdfRenderingError: WeasyPrint failed or produced no output
        """
        try:
            content = _write_pdf(
                inject_header(html, options.header_options.header_html),
                build_page_css(options),
                self.base_url,
            )
        except Exception as e:
            raise PdfRenderingError(f"PDF rendering failed: {e}") from e

        if not content:
            raise PdfRenderingError("PDF rendering produced no output")
        return PdfDocument(content=content)
