# kaspiparser/kaspi/transactions.py
"""
Kaspi Gold / card account transactions.

One row per line, all on the same line as the date:

    15.03.24- 2 500,00 ₸ Покупка    MAGNUM ALMATY
    14.03.24+ 50 000,00 ₸ Пополнение    С Kaspi Депозита
    12.03.24- 4 410,00 ₸ Purchase    STEAM (-9.80 USD)

The operation word is split from the details by script for Russian and
English statements, and by runs of whitespace for everything else.
"""
import logging
import re
from typing import List, Optional

from kaspiparser.core.errors import FieldNotFound, MalformedTransactionLine, NoTransactionsFound
from kaspiparser.core.models import Locale, Transaction
from kaspiparser.kaspi.patterns import TX_PATTERN_OTHER, TX_PATTERNS
from kaspiparser.kaspi.utils import normalize_amount_text, parse_date_from_pdf_text

log = logging.getLogger(__name__)


def transaction_pattern_for(locale: Locale) -> re.Pattern:
    return TX_PATTERNS.get(locale, TX_PATTERN_OTHER)


def _clean_original_amount(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    return raw.strip().strip("()").strip() or None


def _clean_description(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    return " ".join(raw.split()) or None


def parse_standard_transactions(text: str, locale: Locale, statement_uid: str) -> List[Transaction]:
    pattern = transaction_pattern_for(locale)
    matches = list(pattern.finditer(text))
    if not matches:
        raise NoTransactionsFound()
    log.debug("Transaction pattern for %s: %d candidate rows", locale.value, len(matches))

    result: List[Transaction] = []
    for m in matches:
        # connector / "details" lines carry the date and sign but no sum
        if not re.search(r"\d", m.group("amount") or ""):
            log.debug("Skipping row without amount: %r", m.group(0))
            continue
        try:
            date = parse_date_from_pdf_text(m.group(0))
        except FieldNotFound as e:
            raise MalformedTransactionLine(m.group(0)) from e
        result.append(Transaction(
            date=date,
            amount=normalize_amount_text(m.group("amount")),
            original_amount=_clean_original_amount(m.group("original")),
            description=_clean_description(m.group("description")),
            hold=False,
            statement_uid=statement_uid,
        ))
    return result
