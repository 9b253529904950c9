import logging
from typing import Iterable, List, Tuple

from kaspiparser.core.errors import NotKaspiStatement, StatementParseError
from kaspiparser.core.models import Statement
from kaspiparser.kaspi.parser import parse_single_pdf_string
from kaspiparser.kaspi.patterns import BANK_NAME_PATTERN

log = logging.getLogger(__name__)


def parse_statement_text(text: str) -> Statement:
    if not BANK_NAME_PATTERN.search(text):
        raise NotKaspiStatement()
    return parse_single_pdf_string(text)


def parse_pdf_statements_report(
    texts: Iterable[str],
) -> Tuple[List[Statement], List[Tuple[int, StatementParseError]]]:
    """
    Parse every text blob, collecting failures instead of stopping.
    Returns (statements in input order, [(blob index, error), ...]).
    """
    statements: List[Statement] = []
    failures: List[Tuple[int, StatementParseError]] = []
    for i, text in enumerate(texts):
        try:
            statements.append(parse_statement_text(text))
        except StatementParseError as e:
            log.error("Statement #%d failed: %s", i, e)
            failures.append((i, e))
    return statements, failures


def parse_pdf_statements(texts: Iterable[str]) -> List[Statement]:
    """One statement per text blob, in input order; the first failure aborts the batch."""
    result: List[Statement] = []
    for i, text in enumerate(texts):
        log.debug("Statement #%d: %d chars", i, len(text))
        try:
            result.append(parse_statement_text(text))
        except StatementParseError as e:
            log.error("Statement #%d failed: %s", i, e)
            raise
    return result
