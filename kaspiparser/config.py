import os
from pathlib import Path

# Path to this file
CONFIG_PATH = Path(__file__).resolve()

# Project root = one level above 'kaspiparser'
BASE_DIR = CONFIG_PATH.parent.parent
DATA_DIR = BASE_DIR / "data"
OUT_DIR = DATA_DIR / "out"

DEBUG_MODE = os.environ.get("DEBUG_PARSER", "false").lower() == "true"

# Kaspi refuses statements of 1 MB and more
MAX_PDF_SIZE = int(os.environ.get("KASPI_MAX_PDF_SIZE", 1000 * 1000))

# "fitz" (PyMuPDF) or "pdfplumber"
PDF_ENGINE = os.environ.get("KASPI_PDF_ENGINE", "fitz").lower()
