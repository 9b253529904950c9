# kaspiparser/kaspi/utils.py
import re
from datetime import datetime
from typing import Optional

from kaspiparser.core.errors import FieldNotFound
from kaspiparser.core.models import Amount

SPACE_CHARS_CLASS = r"\u00A0\u202F "
AMOUNT_TOKEN_REGEX = re.compile(
    rf"[+\-]?[{SPACE_CHARS_CLASS}]*\d[\d{SPACE_CHARS_CLASS}]*(?:[.,]\d+)?"
)
DATE_PREFIX_REGEX = re.compile(r"^(\d{2}).(\d{2}).(\d{2})")

HOME_INSTRUMENT = "KZT"

# symbol / spelling -> ISO code, checked in this order
CURRENCY_SIGNS = [
    ("₸", "KZT"),
    ("$", "USD"),
    ("€", "EUR"),
    ("₽", "RUB"),
]
CURRENCY_WORDS_REGEX = re.compile(r"(?<![а-яА-ЯёЁңҢ])(тенге|теңге|тг)(?![а-яА-ЯёЁңҢ])", re.I)
CURRENCY_CODES = ("KZT", "USD", "EUR", "RUB", "GBP", "CNY")
CURRENCY_CODE_REGEX = re.compile(r"\b(" + "|".join(CURRENCY_CODES) + r")\b")


def _find_instrument(text: str) -> str:
    for sign, code in CURRENCY_SIGNS:
        if sign in text:
            return code
    if CURRENCY_WORDS_REGEX.search(text):
        return HOME_INSTRUMENT
    m = CURRENCY_CODE_REGEX.search(text)
    return m.group(1) if m else ""


def parse_amount(text: str) -> Amount:
    """
    '-12345.67 ₸' -> Amount(-12345.67, 'KZT')
    '+ 1 877,62 ₸' -> Amount(1877.62, 'KZT')
    '$1500.00'    -> Amount(1500.0, 'USD')
    '250.00'      -> Amount(250.0, '')
    """
    s = text.replace("\u00A0", " ").replace("\u202F", " ").replace("\u2212", "-").strip()
    instrument = _find_instrument(s)
    m = AMOUNT_TOKEN_REGEX.search(s.replace("$", ""))
    if not m:
        raise ValueError(f"Can't parse amount from {text!r}")
    num = re.sub(rf"[{SPACE_CHARS_CLASS}]", "", m.group(0)).replace(",", ".")
    return Amount(sum=float(num), instrument=instrument)


def normalize_amount_text(text: str) -> str:
    """'- 1 000,00' -> '-1000.00'; the printed sign is kept as is."""
    s = re.sub(rf"[\s{SPACE_CHARS_CLASS}$₸]", "", text).replace("\u2212", "-")
    return s.replace(",", ".")


def to_ddmmy_date(s: str) -> Optional[datetime]:
    """
    Parse '01.09.24' or '01.09.2024' to datetime or None.
    """
    for fmt in ("%d.%m.%y", "%d.%m.%Y"):
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            pass
    return None


def parse_date_from_pdf_text(text: str, field: str = "date") -> str:
    """
    '15.03.24 rest of line' -> '2024-03-15T00:00:00.000'
    """
    m = DATE_PREFIX_REGEX.match(text)
    if m is None or to_ddmmy_date(".".join(m.groups())) is None:
        raise FieldNotFound(field, f"Can't parse date from pdf string {text[:20]!r}")
    day, month, year = m.groups()
    return f"20{year}-{month}-{day}T00:00:00.000"


def mask_account_number(number: str) -> str:
    """Long card/account numbers are shown the way Kaspi prints them: '*' + last 4."""
    return f"*{number[-4:]}" if len(number) > 5 else number
