from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd


class Locale(str, Enum):
    RUSSIAN = "ru"
    ENGLISH = "en"
    KAZAKH = "kz"
    UNKNOWN = "unknown"


class AccountType(str, Enum):
    CHECKING = "checking"
    DEPOSIT = "deposit"
    GOLD = "gold"


@dataclass(frozen=True)
class Amount:
    sum: float
    instrument: str = ""


@dataclass
class Account:
    id: str
    instrument: str
    title: str
    balance: float
    date: str


@dataclass
class Transaction:
    date: str
    amount: str
    statement_uid: str
    original_amount: Optional[str] = None
    description: Optional[str] = None
    hold: bool = False


TX_COLUMNS = ["date", "amount", "original_amount", "description", "hold", "statement_uid"]


@dataclass
class Statement:
    account: Account
    transactions: List[Transaction] = field(default_factory=list)
    statement_uid: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statement_uid": self.statement_uid,
            "account": asdict(self.account),
            "transactions": [asdict(tx) for tx in self.transactions],
        }

    @property
    def account_df(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(self.account)])

    @property
    def tx_df(self) -> pd.DataFrame:
        if not self.transactions:
            return pd.DataFrame(columns=TX_COLUMNS)
        return pd.DataFrame([asdict(tx) for tx in self.transactions], columns=TX_COLUMNS)
