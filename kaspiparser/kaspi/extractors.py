# kaspiparser/kaspi/extractors.py
import logging

from kaspiparser.core.errors import FieldNotFound, LocaleUnknown, UnknownInstrument
from kaspiparser.core.models import AccountType, Amount, Locale
from kaspiparser.kaspi.patterns import (
    ACCOUNT_ID_PATTERNS,
    ACCOUNT_NUMBER_PATTERNS,
    ACCOUNT_TYPE_PATTERNS,
    BALANCE_PATTERNS,
    DEPOSIT_KEYWORDS,
    GOLD_KEYWORDS,
    INSTRUMENT_PATTERNS,
    KNOWN_INSTRUMENTS,
    STATEMENT_DATE_PATTERNS,
    first_match,
    get_statement_locale,
)
from kaspiparser.kaspi.utils import mask_account_number, parse_amount, parse_date_from_pdf_text

log = logging.getLogger(__name__)

TITLE_BY_LOCALE_AND_TYPE = {
    Locale.RUSSIAN: {
        AccountType.CHECKING: "Kaspi Счет",
        AccountType.DEPOSIT: "Депозит",
        AccountType.GOLD: "Kaspi Gold",
    },
    Locale.ENGLISH: {
        AccountType.CHECKING: "Kaspi Account",
        AccountType.DEPOSIT: "Deposit",
        AccountType.GOLD: "Kaspi Gold",
    },
    Locale.KAZAKH: {
        AccountType.CHECKING: "Kaspi Шот",
        AccountType.DEPOSIT: "Депозит",
        AccountType.GOLD: "Kaspi Gold",
    },
}


def parse_account_id(text: str) -> str:
    m = first_match(ACCOUNT_ID_PATTERNS, text, required="id")
    if m is None:
        raise FieldNotFound("account_id")
    return m.group("id")


def parse_balance(text: str) -> Amount:
    """
    Kaspi prints the balance line in one of four shapes:

        Доступно на 15.03.24: -12 345,67 ₸
        Card balance 15.03.24: 1 000,00 ₸
        15.03.24ж. қолжетімді: 500,00 ₸
        На Депозите 15.03.24: $1 500,00

    The date is dropped here (see get_statement_date). Only the rest of the
    balance line goes to parse_amount: whatever follows on the next lines is
    not a currency suffix.
    """
    m = first_match(BALANCE_PATTERNS, text, required="sum")
    if m is None:
        raise FieldNotFound("balance")

    raw = (m.group("sum") + m.group("suffix")).strip().split("\n", 1)[0].strip()
    try:
        return parse_amount(raw)
    except ValueError as e:
        raise FieldNotFound("balance", f"Can't parse balance from {raw!r}") from e


def get_statement_date(text: str) -> str:
    m = first_match(STATEMENT_DATE_PATTERNS, text, required="date")
    if m is None:
        raise FieldNotFound("date")
    return parse_date_from_pdf_text(m.group("date"), field="date")


def parse_instrument(text: str) -> str:
    m = first_match(INSTRUMENT_PATTERNS, text, required="instrument")
    if m is None:
        raise FieldNotFound("instrument")
    value = m.group("instrument")
    if value not in KNOWN_INSTRUMENTS:
        raise UnknownInstrument(value)
    return KNOWN_INSTRUMENTS[value]


def parse_account_type(text: str) -> AccountType:
    m = first_match(ACCOUNT_TYPE_PATTERNS, text)
    phrase = m.group("type").lower() if m is not None else ""
    if any(word in phrase for word in DEPOSIT_KEYWORDS):
        return AccountType.DEPOSIT
    if any(word in phrase for word in GOLD_KEYWORDS):
        return AccountType.GOLD
    return AccountType.CHECKING


def parse_account_title(text: str, account_type: AccountType) -> str:
    locale = get_statement_locale(text)
    if locale is Locale.UNKNOWN:
        raise LocaleUnknown()
    title = TITLE_BY_LOCALE_AND_TYPE[locale][account_type]

    m = first_match(ACCOUNT_NUMBER_PATTERNS, text, required="number")
    if m is not None:
        title += " " + mask_account_number(m.group("number"))
    log.debug("Account title (%s, %s): %s", locale.value, account_type.value, title)
    return title
