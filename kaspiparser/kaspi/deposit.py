# kaspiparser/kaspi/deposit.py
"""
Kaspi Deposit transactions.

Deposit statements repeat the table header on every page and print the
details of an operation in a separate block, two lines per transaction
(category line + free text), instead of next to the row:

    ДатаСуммаОперацияДеталиНа Депозите
    01.02.24+ 100 000,00 ₸Пополнение 1 100 000,00 ₸
    05.02.24- 20 000,00 ₸Перевод 1 080 000,00 ₸
    С Kaspi Gold
    Пополнение депозита
    На Kaspi Gold
    Частичное снятие

The detail lines are attached to rows only when there are exactly two per row
on the page; otherwise the page gets no details at all.
"""
import logging
from typing import List, Optional

from kaspiparser.core.errors import FieldNotFound, MalformedTransactionLine, NoTransactionsFound
from kaspiparser.core.models import Transaction
from kaspiparser.kaspi.patterns import (
    DEPOSIT_AMOUNT_LEFTOVER,
    DEPOSIT_BOILERPLATE,
    DEPOSIT_HEADER,
    DEPOSIT_ROW_PATTERN,
)
from kaspiparser.kaspi.utils import normalize_amount_text, parse_date_from_pdf_text

log = logging.getLogger(__name__)


def split_deposit_pages(text: str) -> List[str]:
    start = text.find(DEPOSIT_HEADER)
    if start < 0:
        raise NoTransactionsFound("Can't parse transactions for deposit account")
    return [page for page in text[start:].split(DEPOSIT_HEADER) if page != ""]


def _pair_lines(lines: List[str]) -> List[str]:
    return [" ".join(lines[i:i + 2]).strip() for i in range(0, len(lines), 2)]


def page_descriptions(page: str, row_count: int) -> List[str]:
    """Detail lines left on the page once rows are cut out, joined in pairs."""
    lines = DEPOSIT_ROW_PATTERN.sub("", page.replace(DEPOSIT_HEADER, "", 1)).strip().split("\n")
    if row_count > 0 and len(lines) == 2 * row_count:
        return _pair_lines(lines)
    log.debug("Deposit page: %d rows vs %d detail lines, details dropped", row_count, len(lines))
    return []


def clean_inline_details(details: Optional[str]) -> Optional[str]:
    if details is None:
        return None
    for token in DEPOSIT_BOILERPLATE:
        details = details.replace(token, "", 1)
    details = DEPOSIT_AMOUNT_LEFTOVER.sub("", details, count=1)
    details = details.strip()
    return details or None


def parse_deposit_page(page: str, statement_uid: str) -> List[Transaction]:
    rows = list(DEPOSIT_ROW_PATTERN.finditer(page))
    descriptions = page_descriptions(page, len(rows))

    result: List[Transaction] = []
    for index, m in enumerate(rows):
        # some rows come without a sum
        if m.group("amount") is None:
            continue
        try:
            date = parse_date_from_pdf_text(m.group(0))
        except FieldNotFound as e:
            raise MalformedTransactionLine(m.group(0)) from e

        description = clean_inline_details(m.group("details"))
        if description is None and index < len(descriptions) and descriptions[index]:
            description = descriptions[index]

        result.append(Transaction(
            date=date,
            amount=normalize_amount_text(m.group("amount")),
            original_amount=None,
            description=description,
            hold=False,
            statement_uid=statement_uid,
        ))
    return result


def parse_deposit_transactions(text: str, statement_uid: str) -> List[Transaction]:
    result: List[Transaction] = []
    for page in split_deposit_pages(text):
        result.extend(parse_deposit_page(page, statement_uid))
    log.debug("Deposit statement: %d transactions", len(result))
    return result
