import pytest

# Text as it comes out of the PDF text layer: the date is glued to the sign
# of the amount, columns are separated by runs of spaces.

RU_GOLD_TEXT = """АО «Kaspi Bank», БИК CASPKZKA, www.kaspi.kz
ВЫПИСКА
по Kaspi Gold за период с 01.03.24 по 15.03.24
Иванов Иван
Номер карты: *1234
Номер счета: KZ12722C000012345678
Валюта счета: тенге
Доступно на 15.03.24: -12 345,67 ₸
Дата Сумма Операция Детали
15.03.24- 2 500,00 ₸ Покупка    MAGNUM ALMATY
14.03.24+ 50 000,00 ₸ Пополнение    С Kaspi Депозита
12.03.24- 4 410,00 ₸ Покупка    STEAM (-9.80 USD)
"""

RU_CHECKING_TEXT = """АО «Kaspi Bank», БИК CASPKZKA, www.kaspi.kz
ВЫПИСКА
по текущему счету за период с 01.03.24 по 15.03.24
Номер счета: KZ12722C000012345678
Доступно на 15.03.24: 3 000,00 ₸
Дата Сумма Операция Детали
10.03.24- 1 000,00 ₸ Перевод    Айгерим А.
"""

EN_GOLD_TEXT = """JSC Kaspi Bank, BIC CASPKZKA, www.kaspi.kz Kaspi Gold
Kaspi Gold statement balance for the period from 01.03.24 to 15.03.24
John Smith
Card number: *5678
Account number: KZ98722C000098765432
Currency: KZT
Card balance 15.03.24: 1 000,00 ₸
Date Amount Transaction Details
12.03.24- 4 410,00 ₸ Purchase    STEAM GAMES (-9.80 USD)
10.03.24+ 20 000,00 ₸ Replenishment    From Kaspi Deposit
"""

KZ_GOLD_TEXT = """«Kaspi Bank» АҚ, БСК CASPKZKA, www.kaspi.kz
ҮЗІНДІ КӨШІРМЕ
01.03.24 бастап 15.03.24 дейінгі кезеңге Kaspi Gold картасы бойынша
Карта нөмірі: *4321
Шот нөмірі: KZ55722C000011112222
Шот валютасы: теңге
15.03.24ж. қолжетімді: 7 500,00 ₸
Күні Сомасы Операция Толығырақ
13.03.24- 1 200,00 ₸   Сатып алу   SMALL ALMATY
11.03.24+ 3 000,00 ₸   Толықтыру   Kaspi Депозиттен
"""

RU_DEPOSIT_TEXT = """АО «Kaspi Bank», БИК CASPKZKA, www.kaspi.kz
ВЫПИСКА
по Kaspi Депозиту за период с 01.02.24 по 29.02.24
Номер счета: KZ11722S000033334444
Валюта счета: тенге
На Депозите 29.02.24: 1 080 000,00 ₸
ДатаСуммаОперацияДеталиНа Депозите
01.02.24+ 100 000,00 ₸Пополнение 1 100 000,00 ₸
05.02.24- 20 000,00 ₸Перевод 1 080 000,00 ₸
С Kaspi Gold
Пополнение депозита
На Kaspi Gold
Частичное снятие
"""


@pytest.fixture
def ru_gold_text():
    return RU_GOLD_TEXT


@pytest.fixture
def ru_checking_text():
    return RU_CHECKING_TEXT


@pytest.fixture
def en_gold_text():
    return EN_GOLD_TEXT


@pytest.fixture
def kz_gold_text():
    return KZ_GOLD_TEXT


@pytest.fixture
def ru_deposit_text():
    return RU_DEPOSIT_TEXT
