# kaspiparser/utils/pdf_text.py
"""
PDF -> plain text for the statement parser.

Kaspi statements are text PDFs, so no OCR: PyMuPDF (fitz) by default,
pdfplumber as the alternative engine. Pre-extracted '.txt' dumps are read
as is.
"""
import logging
from pathlib import Path
from typing import List, Sequence, Union

from kaspiparser.config import MAX_PDF_SIZE, PDF_ENGINE
from kaspiparser.core.errors import InvalidStatementFile

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def validate_pdf_file(path: PathLike, max_size: int = MAX_PDF_SIZE) -> Path:
    pdf_path = Path(path)
    if pdf_path.suffix.lower() != ".pdf":
        raise InvalidStatementFile(pdf_path, "Выписка должна быть в расширении .pdf")
    if not pdf_path.is_file():
        raise InvalidStatementFile(pdf_path, "file not found")
    if pdf_path.stat().st_size >= max_size:
        raise InvalidStatementFile(pdf_path, f"Максимальный размер файла - {max_size // 1000} кб")
    return pdf_path


def _text_with_fitz(pdf_path: Path) -> List[str]:
    import pymupdf as fitz

    with fitz.open(str(pdf_path)) as doc:
        return [page.get_text("text") for page in doc]


def _text_with_pdfplumber(pdf_path: Path) -> List[str]:
    import pdfplumber

    with pdfplumber.open(str(pdf_path)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


ENGINES = {
    "fitz": _text_with_fitz,
    "pdfplumber": _text_with_pdfplumber,
}


def extract_pdf_text(path: PathLike, engine: str = PDF_ENGINE) -> str:
    if engine not in ENGINES:
        raise ValueError(f"Unknown PDF engine: {engine!r} (expected one of {sorted(ENGINES)})")
    pdf_path = validate_pdf_file(path)
    try:
        pages = ENGINES[engine](pdf_path)
    except Exception as e:
        raise InvalidStatementFile(pdf_path, f"can't read PDF with {engine}: {e}") from e
    log.debug("%s: %d pages via %s", pdf_path.name, len(pages), engine)
    return "\n".join(pages)


def load_statement_texts(paths: Sequence[PathLike], engine: str = PDF_ENGINE) -> List[str]:
    """One text blob per input file, in input order."""
    texts: List[str] = []
    for p in paths:
        p = Path(p)
        if p.suffix.lower() == ".txt":
            try:
                texts.append(p.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as e:
                raise InvalidStatementFile(p, f"not a UTF-8 text dump: {e}") from e
        else:
            texts.append(extract_pdf_text(p, engine=engine))
    return texts
