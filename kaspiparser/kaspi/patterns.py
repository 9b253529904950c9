# kaspiparser/kaspi/patterns.py
"""
Kaspi statement pattern registry.

Every statement field has an ordered list of candidate patterns, one or more
per locale (and a deposit variant for balance/date). Candidates are tried
against the full text in listed order and the first that matches wins, so
patterns for different locales must not fire on each other's wording.
"""
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from kaspiparser.core.models import Locale


@dataclass(frozen=True)
class PatternVariant:
    locale: Locale
    pattern: str


def first_match(
    candidates: Sequence[PatternVariant],
    text: str,
    flags: int = 0,
    required: Optional[str] = None,
) -> Optional[re.Match]:
    for variant in candidates:
        m = re.search(variant.pattern, text, flags)
        if m is None:
            continue
        if required is not None and not m.group(required):
            continue
        return m
    return None


# --- Locale ------------------------------------------------------------------

# checked in this order; the English marker has to go before 'ВЫПИСКА'
LOCALE_MARKERS = [
    ("ҮЗІНДІ КӨШІРМЕ", Locale.KAZAKH),
    ("statement balance for the period", Locale.ENGLISH),
    ("ВЫПИСКА", Locale.RUSSIAN),
]


def get_statement_locale(text: str) -> Locale:
    for marker, locale in LOCALE_MARKERS:
        if marker in text:
            return locale
    return Locale.UNKNOWN


# --- Header fields -----------------------------------------------------------

DATE_TOKEN = r"(?:\d\d\.?){3}"

ACCOUNT_ID_PATTERNS = [
    PatternVariant(Locale.RUSSIAN, r"Номер счета:\s*(?P<id>[A-Z0-9]+)"),
    PatternVariant(Locale.ENGLISH, r"Account number:\s?(?P<id>[A-Z0-9]+)"),
    PatternVariant(Locale.KAZAKH, r"Шот нөмірі:\s?(?P<id>[A-Z0-9]+)"),
]

# sum: sign/digits/spaces/separators; suffix: everything up to the next letter
BALANCE_PATTERNS = [
    PatternVariant(
        Locale.RUSSIAN,
        rf"Доступно на (?P<date>{DATE_TOKEN}):(?P<sum>[-+\d\s,.]+)(?P<suffix>[^а-яА-Я]*)",
    ),
    PatternVariant(
        Locale.ENGLISH,
        rf"Card balance (?P<date>{DATE_TOKEN}):(?P<sum>[-+\d\s,.]+)(?P<suffix>[^a-zA-Z]*)",
    ),
    PatternVariant(
        Locale.KAZAKH,
        rf"(?P<date>{DATE_TOKEN})ж\. қолжетімді:(?P<sum>[-+\d\s,.]+)(?P<suffix>[^а-яА-Я]*)",
    ),
    PatternVariant(
        Locale.RUSSIAN,
        rf"На Депозите\s*(?P<date>{DATE_TOKEN}):(?P<sum>\$?[-+\d\s,.]+)(?P<suffix>[^а-яА-Я]*)",
    ),
]

STATEMENT_DATE_PATTERNS = [
    PatternVariant(Locale.RUSSIAN, rf"Доступно на (?P<date>{DATE_TOKEN}):"),
    PatternVariant(Locale.ENGLISH, rf"Card balance (?P<date>{DATE_TOKEN}):"),
    PatternVariant(Locale.KAZAKH, rf"(?P<date>{DATE_TOKEN})ж\. қолжетімді:"),
    PatternVariant(Locale.RUSSIAN, rf"На Депозите (?P<date>{DATE_TOKEN}):"),
]

INSTRUMENT_PATTERNS = [
    PatternVariant(Locale.RUSSIAN, r"Валюта счета:\s?(?P<instrument>\S+)"),
    PatternVariant(Locale.KAZAKH, r"Шот валютасы:\s?(?P<instrument>\S+)"),
    PatternVariant(Locale.ENGLISH, r"Currency:\s?(?P<instrument>\S+)"),
]

ACCOUNT_TYPE_PATTERNS = [
    PatternVariant(Locale.RUSSIAN, r"[Пп]о\s(?P<type>.+) за период"),
    PatternVariant(Locale.KAZAKH, r"кезеңге\s(?P<type>.+) бойынша"),
    PatternVariant(Locale.ENGLISH, r"www\.kaspi\.kz\s(?P<type>.+)\s"),
]

ACCOUNT_NUMBER_PATTERNS = [
    PatternVariant(Locale.RUSSIAN, r"Номер карты:\s?(?P<number>\*\d+)"),
    PatternVariant(Locale.KAZAKH, r"Карта нөмірі:\s?(?P<number>\*\d+)"),
    PatternVariant(Locale.ENGLISH, r"Card number:\s?(?P<number>\*\d+)"),
    PatternVariant(Locale.RUSSIAN, r"Номер счета:\s*(?P<number>[A-Z0-9]+)"),
]

DEPOSIT_KEYWORDS = ("депозит", "deposit")
GOLD_KEYWORDS = ("gold",)

KNOWN_INSTRUMENTS = {
    "тенге": "KZT",
    "теңге": "KZT",
    "KZT": "KZT",
}

# --- Transactions ------------------------------------------------------------

# 15.03.24- 2 500,00 ₸ Purchase    MAGNUM ALMATY (-5.00 USD)
TX_PATTERN_EN = re.compile(
    rf"{DATE_TOKEN}(?P<amount>[-+]\s?[\d\s.,]+)[^A-Za-z0-9_]+(?P<operation>[A-Za-z0-9_]+)\s+"
    r"(?P<description>.+?)\s?(?P<original>\([-+]?[\d.,]+\s?[A-Z]{3}\))?$",
    re.M,
)

# 15.03.24- 2 500,00 ₸ Покупка    MAGNUM ALMATY
TX_PATTERN_RU = re.compile(
    rf"{DATE_TOKEN}(?P<amount>[-+]\s?[\d\s.,]+)[^а-яА-Я]+(?P<operation>[а-яА-Я]+)\s+"
    r"(?P<description>.+?)\s?(?P<original>\([-+]?[\d.,]+\s?[A-Z]{3}\))?$",
    re.M,
)

# Kazakh operation names are not split from the details by script, only by
# runs of whitespace: 15.03.24- 2 500,00 ₸   Сатып алу   MAGNUM ALMATY
TX_PATTERN_OTHER = re.compile(
    rf"{DATE_TOKEN}(?P<amount>[-+]\s?[\d\s.,]+)[^а-яА-Я\s]+\s{{2,}}"
    r"(?P<operation>(?:\S+\s)+)\s{2,}"
    r"(?P<description>\S+(?: {1,2}\S+)* {0,2})"
    r"(?P<original>\s\([^)]+\))?",
    re.M,
)

TX_PATTERNS = {
    Locale.ENGLISH: TX_PATTERN_EN,
    Locale.RUSSIAN: TX_PATTERN_RU,
}

DEPOSIT_HEADER = "ДатаСуммаОперацияДеталиНа Депозите"

DEPOSIT_ROW_PATTERN = re.compile(
    r"^(?P<date>\d{2}\.\d{2}\.\d{2})"
    r"(?P<amount>[-+]\s?[$\d\s.,]+)?"
    r"(?P<details>[^а-яА-Я]*[^$\d]+)"
    r"(?P<balance>\$?\d{1,3}\s?(?:\d{3}\s?)*,\d{2}(?:\s₸)?)?",
    re.M,
)

DEPOSIT_BOILERPLATE = ["Пополнение", "Перевод", "Вознаграждение", "₸"]
DEPOSIT_AMOUNT_LEFTOVER = re.compile(r"\$?\d{1,3}\s?[.,₸]?")

BANK_NAME_PATTERN = re.compile(r"Kaspi Bank", re.I)
