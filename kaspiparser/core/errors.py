"""
Errors raised while turning a Kaspi statement text into account + transactions.

Every error is fatal for the single statement being parsed; nothing here is
retried by the parser itself.
"""
from pathlib import Path
from typing import Union


class StatementParseError(ValueError):
    """Base class for everything the statement parser raises on bad input."""


class LocaleUnknown(StatementParseError):
    def __init__(self, message: str = "Unknown statement locale"):
        super().__init__(message)


class FieldNotFound(StatementParseError):
    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"Can't parse {field} from account statement")


class UnknownInstrument(StatementParseError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Found unknown instrument: {value!r}")


class NoTransactionsFound(StatementParseError):
    def __init__(self, message: str = "No transactions found"):
        super().__init__(message)


class MalformedTransactionLine(StatementParseError):
    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Can't parse transaction: {line!r}")


class NotKaspiStatement(StatementParseError):
    def __init__(self, message: str = "Похоже, это не выписка Kaspi"):
        super().__init__(message)


class InvalidStatementFile(StatementParseError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path.name}: {reason}")
