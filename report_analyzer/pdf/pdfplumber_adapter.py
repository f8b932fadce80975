import io

import pdfplumber
from pdfplumber.page import Page

from report_analyzer.pdf.base import BasePdfExtractor, table_to_markdown
from report_analyzer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """pdfplumber text plus ruled-table detection."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [self._page_text(page) for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return self._join_pages(pages)

    def _page_text(self, page: Page) -> str:
        blocks = [page.extract_text() or ""]
        if self._tables_as_markdown:
            for table in page.extract_tables():
                blocks.extend(table_to_markdown(table))
        return "\n".join(blocks)
