# kaspiparser/kaspi/parser.py
import logging
import uuid
from typing import List, Optional

from kaspiparser.config import DEBUG_MODE
from kaspiparser.core.errors import LocaleUnknown
from kaspiparser.core.models import Account, AccountType, Locale, Statement, Transaction
from kaspiparser.kaspi.deposit import parse_deposit_transactions
from kaspiparser.kaspi.extractors import (
    get_statement_date,
    parse_account_id,
    parse_account_title,
    parse_account_type,
    parse_balance,
    parse_instrument,
)
from kaspiparser.kaspi.patterns import get_statement_locale
from kaspiparser.kaspi.transactions import parse_standard_transactions

log = logging.getLogger(__name__)


def parse_transactions(text: str, account_type: AccountType, statement_uid: str) -> List[Transaction]:
    locale = get_statement_locale(text)
    if locale is Locale.UNKNOWN:
        raise LocaleUnknown()
    if account_type is AccountType.DEPOSIT:
        return parse_deposit_transactions(text, statement_uid)
    return parse_standard_transactions(text, locale, statement_uid)


def parse_single_pdf_string(text: str, statement_uid: Optional[str] = None) -> Statement:
    """
    Parse the text of one Kaspi statement into account + transactions.

    Instrument comes from the balance line when it carries a currency sign,
    otherwise from the explicit 'Валюта счета' / 'Currency' field. Without a
    statement_uid every call gets a fresh one.
    """
    balance = parse_balance(text)
    account_type = parse_account_type(text)
    account = Account(
        id=parse_account_id(text),
        instrument=balance.instrument if balance.instrument != "" else parse_instrument(text),
        title=parse_account_title(text, account_type),
        balance=balance.sum,
        date=get_statement_date(text),
    )
    uid = statement_uid if statement_uid is not None else str(uuid.uuid4())
    transactions = parse_transactions(text, account_type, uid)

    statement = Statement(account=account, transactions=transactions, statement_uid=uid)
    log.info(
        "Parsed %s statement %s: %d transactions",
        account_type.value, account.id, len(transactions),
    )
    if DEBUG_MODE:
        log.debug("=== ACCOUNT ===\n%s", statement.account_df.to_string(index=False))
        log.debug("=== TX (first 20) ===\n%s", statement.tx_df.head(20).to_string(index=False))
    return statement
