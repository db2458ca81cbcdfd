import logging
from io import BytesIO
from pathlib import Path
from typing import Union
from uuid import uuid4
from PyPDF2 import PdfReader
from docx import Document

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

Source = Union[str, Path, BytesIO]


def extract_text_from_pdf(source: Source) -> str:
    """Extract text from a PDF file."""
    try:
        reader = PdfReader(source)
        text = ""
        for page in reader.pages:
            text += (page.extract_text() or "") + "\n"
        return text.strip()
    except Exception as e:
        logger.warning(f"Failed to extract text from PDF: {str(e)}")
        raise ValueError("Could not read resume file") from e


def extract_text_from_docx(source: Source) -> str:
    """Extract text from a DOCX file."""
    try:
        doc = Document(source)
        text = "\n".join([paragraph.text for paragraph in doc.paragraphs])
        return text.strip()
    except Exception as e:
        logger.warning(f"Failed to extract text from DOCX: {str(e)}")
        raise ValueError("Could not read resume file") from e


def extract_text_from_resume(source: Source, mime_type: str) -> str:
    """
    Extract text from a resume file based on its MIME type.

    Args:
        source: Path to the resume file, or an in-memory buffer
        mime_type: MIME type of the file

    Returns:
        Extracted text content

    Raises:
        ValueError: If the file type is not supported, the file cannot be
            read, or no text was found
    """
    if mime_type == PDF_MIME_TYPE:
        text = extract_text_from_pdf(source)
    elif mime_type == DOCX_MIME_TYPE:
        text = extract_text_from_docx(source)
    else:
        raise ValueError(f"Unsupported file type: {mime_type}")

    if not text:
        raise ValueError("No text extracted from resume")

    return text


def store_resume_file(content: bytes, original_filename: str, upload_dir: str) -> Path:
    """Write an uploaded resume to disk under a unique name and return its path."""
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    file_extension = Path(original_filename or "").suffix
    file_path = directory / f"{uuid4()}{file_extension}"

    with open(file_path, "wb") as f:
        f.write(content)

    return file_path
