import pytest

from kaspiparser.core.errors import NoTransactionsFound
from kaspiparser.kaspi.deposit import (
    clean_inline_details,
    page_descriptions,
    parse_deposit_transactions,
    split_deposit_pages,
)
from kaspiparser.kaspi.patterns import DEPOSIT_HEADER

UID = "deposit-1"

ROWS = (
    "01.02.24+ 100 000,00 ₸Пополнение 1 100 000,00 ₸\n"
    "05.02.24- 20 000,00 ₸Перевод 1 080 000,00 ₸\n"
)
DETAILS = [
    "С Kaspi Gold",
    "Пополнение депозита",
    "На Kaspi Gold",
    "Частичное снятие",
]


def _page(detail_lines):
    return DEPOSIT_HEADER + "\n" + ROWS + "\n".join(detail_lines) + "\n"


def test_deposit_transactions(ru_deposit_text):
    txs = parse_deposit_transactions(ru_deposit_text, UID)
    assert [(t.date, t.amount, t.description) for t in txs] == [
        ("2024-02-01T00:00:00.000", "+100000.00", "С Kaspi Gold Пополнение депозита"),
        ("2024-02-05T00:00:00.000", "-20000.00", "На Kaspi Gold Частичное снятие"),
    ]
    assert all(t.original_amount is None and t.hold is False for t in txs)
    assert {t.statement_uid for t in txs} == {UID}


def test_two_lines_per_row_attach_descriptions():
    txs = parse_deposit_transactions(_page(DETAILS), UID)
    assert len(txs) == 2
    assert all(t.description for t in txs)


@pytest.mark.parametrize("detail_lines", [
    DETAILS + ["Лишняя строка"],
    DETAILS[:-1],
])
def test_detail_count_mismatch_drops_descriptions(detail_lines):
    txs = parse_deposit_transactions(_page(detail_lines), UID)
    assert len(txs) == 2
    assert [t.description for t in txs] == [None, None]


def test_prologue_before_header_is_ignored():
    text = "05.01.24+ 1 000,00 ₸Пополнение 1 000,00 ₸\n" + _page(DETAILS)
    txs = parse_deposit_transactions(text, UID)
    assert [t.date for t in txs] == ["2024-02-01T00:00:00.000", "2024-02-05T00:00:00.000"]


def test_each_page_is_aligned_on_its_own():
    page_two = (
        DEPOSIT_HEADER + "\n"
        "10.02.24- 5 000,00 ₸Перевод 1 075 000,00 ₸\n"
        "На Kaspi Gold\n"
    )
    txs = parse_deposit_transactions(_page(DETAILS) + page_two, UID)
    assert [t.description for t in txs] == [
        "С Kaspi Gold Пополнение депозита",
        "На Kaspi Gold Частичное снятие",
        None,
    ]


def test_row_without_amount_is_skipped():
    text = (
        DEPOSIT_HEADER + "\n"
        "03.02.24 Капитализация 1 100 000,00 ₸\n"
        "05.02.24- 20 000,00 ₸Перевод 1 080 000,00 ₸\n"
    )
    txs = parse_deposit_transactions(text, UID)
    assert [(t.date, t.amount) for t in txs] == [("2024-02-05T00:00:00.000", "-20000.00")]


def test_inline_details_win_over_detail_block():
    text = (
        DEPOSIT_HEADER + "\n"
        "29.02.24+ 5 000,00 ₸Вознаграждение по депозиту 1 085 000,00 ₸\n"
        "Начисление\n"
        "за февраль\n"
    )
    [tx] = parse_deposit_transactions(text, UID)
    assert tx.description == "по депозиту"


def test_missing_header():
    with pytest.raises(NoTransactionsFound):
        parse_deposit_transactions("ВЫПИСКА\n01.02.24+ 100 000,00 ₸Пополнение\n", UID)


def test_split_deposit_pages_drops_empty_chunks():
    text = "prologue" + DEPOSIT_HEADER + "page 1" + DEPOSIT_HEADER + DEPOSIT_HEADER + "page 2"
    assert split_deposit_pages(text) == ["page 1", "page 2"]


def test_page_descriptions_pairs_lines():
    assert page_descriptions(_page(DETAILS), 2) == [
        "С Kaspi Gold Пополнение депозита",
        "На Kaspi Gold Частичное снятие",
    ]
    assert page_descriptions(_page(DETAILS), 3) == []
    assert page_descriptions(_page(DETAILS), 0) == []


@pytest.mark.parametrize("details, expected", [
    ("₸Пополнение ", None),
    ("₸Перевод ", None),
    ("₸ Вознаграждение по депозиту ", "по депозиту"),
    (None, None),
])
def test_clean_inline_details(details, expected):
    assert clean_inline_details(details) == expected
