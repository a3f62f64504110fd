"""Native text extraction using PyMuPDF (fitz).

Used as the in-process fallback when the external converter is unavailable.
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from .config import TEXT_SUFFIX
from .utils import text_path_for


def pdf_to_txt(pdf_path: str | Path) -> Path:
    """Write the document's text next to it and return the text file path.

    Pages are separated by form feeds, matching ``pdftotext`` output.
    """
    with fitz.open(str(pdf_path)) as doc:
        text = "\f".join(page.get_text() for page in doc)
    txt_path = Path(text_path_for(pdf_path, TEXT_SUFFIX))
    txt_path.write_text(text, encoding="utf-8")
    return txt_path
