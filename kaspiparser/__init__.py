"""
Kaspi Bank statement parser

Turns the text of a Kaspi PDF statement (Russian, English or Kazakh; card,
Kaspi Gold or deposit account) into one account summary plus its
transactions.
"""

from .core.errors import (
    StatementParseError,
    LocaleUnknown,
    FieldNotFound,
    UnknownInstrument,
    NoTransactionsFound,
    MalformedTransactionLine,
    NotKaspiStatement,
    InvalidStatementFile,
)
from .core.models import Account, AccountType, Amount, Locale, Statement, Transaction
from .core.service import parse_pdf_statements, parse_pdf_statements_report
from .kaspi.parser import parse_single_pdf_string

__version__ = "1.0.0"

__all__ = [
    "parse_single_pdf_string",
    "parse_pdf_statements",
    "parse_pdf_statements_report",
    "Account",
    "AccountType",
    "Amount",
    "Locale",
    "Statement",
    "Transaction",
    "StatementParseError",
    "LocaleUnknown",
    "FieldNotFound",
    "UnknownInstrument",
    "NoTransactionsFound",
    "MalformedTransactionLine",
    "NotKaspiStatement",
    "InvalidStatementFile",
]
