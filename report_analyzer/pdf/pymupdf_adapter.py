from typing import Any

import pymupdf

from report_analyzer.pdf.base import BasePdfExtractor, table_to_markdown
from report_analyzer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """PyMuPDF text in reading order, plus ``find_tables`` output."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [self._page_text(page) for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return self._join_pages(pages)

    def _page_text(self, page: Any) -> str:
        blocks = [page.get_text(sort=True)]
        if self._tables_as_markdown:
            for table in page.find_tables().tables:
                blocks.extend(table_to_markdown(table.extract()))
        return "\n".join(blocks)
