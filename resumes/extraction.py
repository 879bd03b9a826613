"""
Plain-text extraction for uploaded resume files.

PDF parsing uses pdfplumber, DOCX parsing uses python-docx.
"""
from io import BytesIO

import pdfplumber
from docx import Document


class ResumeExtractionError(Exception):
    """
    Raised when a resume file yields no usable text.
    """


def file_extension(filename: str) -> str:
    """
    Lower-cased text after the last dot, or "" when there is none.
    """
    if '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[-1].lower()


def extract_text(file_bytes: bytes, filename: str) -> str:
    """
    Extract text from the bytes of a PDF or DOCX resume.

    Args:
        file_bytes: Raw file content.
        filename: Original name, used to pick the parser.

    Returns:
        Newline-joined text of the document.

    Raises:
        ResumeExtractionError: Unsupported format or nothing extracted.
    """
    extension = file_extension(filename)
    try:
        if extension == 'pdf':
            parts = _pdf_text_parts(file_bytes)
        elif extension == 'docx':
            parts = _docx_text_parts(file_bytes)
        else:
            raise ResumeExtractionError(f"Unsupported file format: {extension or filename}")
    except ResumeExtractionError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ResumeExtractionError(f"Error reading {filename}: {exc}") from exc

    if not parts:
        raise ResumeExtractionError(f"No text could be extracted from {filename}")
    return "\n".join(parts)


def _pdf_text_parts(file_bytes: bytes) -> list:
    parts = []
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text and page_text.strip():
                parts.append(page_text.strip())
    return parts


def _docx_text_parts(file_bytes: bytes) -> list:
    doc = Document(BytesIO(file_bytes))
    return [p.text.strip() for p in doc.paragraphs if p.text.strip()]
