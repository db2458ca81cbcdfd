from io import BytesIO

import pytest
from docx import Document

from swiftjobs.services.resume_parser import (
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    extract_text_from_resume,
)


def _docx_buffer(*paragraphs):
    buffer = BytesIO()
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    document.save(buffer)
    buffer.seek(0)
    return buffer


def test_extract_text_from_docx_joins_paragraphs():
    text = extract_text_from_resume(_docx_buffer("Ada Lovelace", "Analyst"), DOCX_MIME_TYPE)

    assert text == "Ada Lovelace\nAnalyst"


def test_empty_docx_is_rejected():
    with pytest.raises(ValueError, match="No text extracted"):
        extract_text_from_resume(_docx_buffer(), DOCX_MIME_TYPE)


@pytest.mark.parametrize("mime_type", [PDF_MIME_TYPE, DOCX_MIME_TYPE])
def test_corrupt_files_raise_value_error(mime_type):
    with pytest.raises(ValueError, match="Could not read resume file"):
        extract_text_from_resume(BytesIO(b"garbage bytes"), mime_type)


@pytest.mark.parametrize("mime_type", ["application/msword", "text/plain"])
def test_unsupported_types_are_rejected(mime_type):
    with pytest.raises(ValueError, match="Unsupported file type"):
        extract_text_from_resume(BytesIO(b"anything"), mime_type)
