# file_utils.py
import logging
from io import BytesIO
from pathlib import Path
from typing import Optional, Tuple

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".pdf")


def _pdf_text(file_bytes: bytes) -> Optional[str]:
    try:
        reader = PdfReader(BytesIO(file_bytes))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        logger.warning("Could not read PDF job description: %s", e)
        return None
    return "\n".join(pages)


def read_job_description(filename: str, data: bytes) -> Optional[str]:
    """
    Pull the JD text out of an uploaded .txt or .pdf file.
    Returns None when the file is empty, unreadable or of another type.
    """
    if not data:
        return None

    suffix = Path(filename or "").suffix.lower()
    if suffix == ".txt":
        text = data.decode("utf-8", errors="replace")
    elif suffix == ".pdf":
        text = _pdf_text(data)
    else:
        logger.warning("Unsupported job description file type: %r", filename)
        return None

    text = (text or "").strip()
    return text or None


def resolve_job_description(
    use_upload: bool,
    pasted_text: Optional[str],
    filename: Optional[str] = None,
    data: Optional[bytes] = None,
) -> Tuple[Optional[str], str]:
    """
    Pick the JD text from the source the user chose.
    Returns (text or None, label naming that source) so the UI can say
    which one the questions came from.
    """
    if use_upload:
        label = f"uploaded file '{filename}'" if filename else "uploaded file"
        if not filename or not data:
            return None, label
        return read_job_description(filename, data), label

    text = (pasted_text or "").strip()
    return (text or None), "pasted text"
