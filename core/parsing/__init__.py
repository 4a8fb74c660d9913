"""Document-to-text extraction for uploaded resumes."""
from core.parsing.document_parser import DocumentParser, ParsedDocument

__all__ = ['DocumentParser', 'ParsedDocument']
