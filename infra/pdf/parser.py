import io
import logging

import pdfplumber

from domain.errors import ExtractionFault

logger = logging.getLogger(__name__)


def parse_pdf_text(data: bytes) -> str:
    text_parts = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            t = page.extract_text() or ""
            text_parts.append(t)
    return "\n".join(text_parts)


class PdfTextExtractor:
    """Reads plain text out of an in-memory PDF with pdfplumber.

    Any parser failure is reported as ``ExtractionFault`` so a malformed
    upload maps to the same client error as a PDF without text.
    """

    def extract_text(self, data: bytes) -> str:
        try:
            return parse_pdf_text(data)
        except Exception as exc:
            logger.warning("PDF parsing failed: %r", exc)
            raise ExtractionFault(
                "Could not read the PDF file (it may be corrupted or not a real PDF).") from exc
