"""
Document Parser - Extract plain text from uploaded resume files.

Supports:
- Plain Text (.txt)
- Word Documents (.docx)
- PDF (.pdf)

Anything else raises UnsupportedDocumentFormat before any bytes are read.
"""
import io
import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

from docx import Document
from pypdf import PdfReader

from core.exceptions import DocumentParseError, UnsupportedDocumentFormat

logger = logging.getLogger(__name__)


@dataclass
class ParsedDocument:
    """Result of extracting text from an uploaded file.

    Attributes:
        text: Extracted text
        format: Detected file format ('txt', 'docx' or 'pdf')
        filename: Original upload name
    """
    text: str
    format: str
    filename: str


class DocumentParser:
    """Extract text from upload bytes, routing on the file extension."""

    SUPPORTED_FORMATS = {'.txt', '.docx', '.pdf'}

    def __init__(self, max_file_size_bytes: Optional[int] = None):
        self.max_file_size_bytes = max_file_size_bytes

    def extract_text(self, filename: str, data: bytes) -> ParsedDocument:
        """Extract text from an uploaded document.

        Args:
            filename: Upload name, used only for format detection
            data: Raw file contents

        Returns:
            ParsedDocument with non-empty text

        Raises:
            UnsupportedDocumentFormat: If the extension is not supported
            DocumentParseError: If the file is too large, unreadable or has no text
        """
        ext = PurePath(filename).suffix.lower()

        if ext not in self.SUPPORTED_FORMATS:
            raise UnsupportedDocumentFormat(
                "UNSUPPORTED FORMAT: Please use PDF, DOCX, or TXT."
            )

        if self.max_file_size_bytes is not None and len(data) > self.max_file_size_bytes:
            limit_mb = self.max_file_size_bytes / (1024 * 1024)
            raise DocumentParseError(
                f"REJECTED: {filename} is too large. Limit is {limit_mb:g}MB."
            )

        logger.info(f"Extracting text from {filename} (format: {ext}, {len(data)} bytes)")

        if ext == '.txt':
            text = self._parse_txt(filename, data)
        elif ext == '.docx':
            text = self._parse_docx(filename, data)
        else:
            text = self._parse_pdf(filename, data)

        if not text.strip():
            raise DocumentParseError("EMPTY DOCUMENT: No text content found.")

        return ParsedDocument(text=text, format=ext.lstrip('.'), filename=filename)

    def _parse_txt(self, filename: str, data: bytes) -> str:
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DocumentParseError(
                f"FILE ERROR: Could not process this TXT file ({e}). Ensure it is UTF-8 encoded."
            ) from e

    def _parse_docx(self, filename: str, data: bytes) -> str:
        """Text from all paragraphs, then table rows (common in resumes)."""
        try:
            doc = Document(io.BytesIO(data))

            paragraphs = []
            for para in doc.paragraphs:
                if para.text.strip():
                    paragraphs.append(para.text.strip())

            for table in doc.tables:
                for row in table.rows:
                    row_texts = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if row_texts:
                        paragraphs.append(' '.join(row_texts))

            return '\n\n'.join(paragraphs)

        except Exception as e:
            logger.error(f"DOCX parse failure for {filename}: {e}")
            raise DocumentParseError("FILE ERROR: Could not process this DOCX file.") from e

    def _parse_pdf(self, filename: str, data: bytes) -> str:
        """Text from every page; pages that fail to extract are skipped."""
        try:
            reader = PdfReader(io.BytesIO(data))
        except Exception as e:
            logger.error(f"PDF parse failure for {filename}: {e}")
            raise DocumentParseError("FILE ERROR: Could not process this PDF file.") from e

        pages_text = []
        for i, page in enumerate(reader.pages):
            try:
                page_text = page.extract_text()
                if page_text and page_text.strip():
                    pages_text.append(page_text.strip())
            except Exception as e:
                logger.warning(f"Skipping page {i + 1} of {filename}: {e}")

        text = '\n'.join(pages_text)
        logger.debug(f"Parsed PDF {filename} ({len(reader.pages)} pages, {len(text)} chars extracted)")
        return text

    def is_supported(self, filename: str) -> bool:
        return PurePath(filename).suffix.lower() in self.SUPPORTED_FORMATS

    @classmethod
    def get_supported_formats(cls) -> list[str]:
        return sorted(cls.SUPPORTED_FORMATS)
