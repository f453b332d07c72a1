"""
Account Module

Savings and checking accounts sharing one operation set: deposit,
withdraw, display and transaction history. Savings accounts additionally
carry the interest-bearing capability, which callers query through the
account kind instead of inspecting the concrete class.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Union
from enum import Enum

from .currency import Numeric, to_decimal, format_amount, format_money
from .policies import InterestCalculator, OverdraftProtection
from .errors import InsufficientFunds, OverdraftExceeded, UnknownAccountKind, NotSupported
from .config import get_config
from .logging_config import get_logger

logger = get_logger("pocket_bank.accounts")


class AccountKind(Enum):
    """Account variants with their display label and capabilities"""
    SAVINGS = ("savings", "Savings Account", True)
    CHECKING = ("checking", "Checking Account", False)

    def __init__(self, code: str, label: str, interest_bearing: bool):
        self.code = code
        self.label = label
        self.interest_bearing = interest_bearing

    @classmethod
    def from_code(cls, code: str) -> 'AccountKind':
        """Resolve a kind from its code ('savings', 'checking')"""
        for kind in cls:
            if kind.code == code:
                return kind
        raise UnknownAccountKind(code)


class BankAccount(ABC):
    """
    Base account: owner, balance and an append-only transaction history

    Subclasses decide withdrawal rules and the variant-specific part of
    display(). Balances are kept exact; rounding happens when formatting.
    """

    kind: AccountKind

    def __init__(self, owner: str, initial_balance: Numeric):
        self._owner = owner
        self._balance = to_decimal(initial_balance)
        self._transaction_history: List[str] = []

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def transaction_history(self) -> List[str]:
        return list(self._transaction_history)

    @property
    def supports_interest(self) -> bool:
        """Check if this account kind is interest-bearing"""
        return self.kind.interest_bearing

    def as_interest_bearing(self) -> Optional['BankAccount']:
        """Return this account if it supports apply_interest(), else None"""
        if self.supports_interest:
            return self
        return None

    def add_transaction(self, entry: str) -> None:
        self._transaction_history.append(entry)

    def deposit(self, amount: Numeric) -> None:
        """
        Add amount to the balance and record it

        No sign check here; the operation boundary rejects non-positive
        amounts before they reach the account.
        """
        amount = to_decimal(amount)
        entry = f"Deposited: {format_money(amount, self._symbol())}"
        self._balance += amount
        self.add_transaction(entry)

    def withdraw(self, amount: Numeric) -> None:
        amount = to_decimal(amount)
        self._check_withdrawal(amount)
        entry = f"Withdrawn: {format_money(amount, self._symbol())}"
        self._balance -= amount
        self.add_transaction(entry)

    def apply_interest(self) -> Decimal:
        raise NotSupported("This account does not support interest calculation.")

    def history(self) -> List[str]:
        """Transaction log entries, oldest first"""
        return list(self._transaction_history)

    def display(self) -> str:
        return (f"{self.kind.label}: {self._owner} | "
                f"Balance: {format_money(self._balance, self._symbol())} | "
                f"{self._describe_terms()}")

    def display_transaction_history(self) -> str:
        lines = [f"Transaction History for {self._owner}:"]
        lines.extend(self._transaction_history)
        return "\n".join(lines)

    @abstractmethod
    def _check_withdrawal(self, amount: Decimal) -> None:
        """Raise the variant's domain error if amount cannot be withdrawn"""
        pass

    @abstractmethod
    def _describe_terms(self) -> str:
        """Variant-specific tail of display()"""
        pass

    @staticmethod
    def _symbol() -> str:
        return get_config().currency_symbol

    def __repr__(self) -> str:
        return f"{type(self).__name__}(owner={self._owner!r}, balance={self._balance})"


class SavingsAccount(BankAccount):
    """Savings account: never overdrawn, earns interest on demand"""

    kind = AccountKind.SAVINGS

    def __init__(self, owner: str, initial_balance: Numeric, interest_rate: Numeric):
        super().__init__(owner, initial_balance)
        self._interest_rate = to_decimal(interest_rate)

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def apply_interest(self) -> Decimal:
        """
        Credit interest on the current balance

        The interest goes through deposit(), so it is logged as a deposit
        and then followed by an "Interest Applied" entry.

        Returns:
            The interest amount credited
        """
        interest = InterestCalculator.calculate_interest(self._balance, self._interest_rate)
        entry = f"Interest Applied: {format_money(interest, self._symbol())}"
        self.deposit(interest)
        self.add_transaction(entry)
        return interest

    def _check_withdrawal(self, amount: Decimal) -> None:
        if amount > self._balance:
            raise InsufficientFunds()

    def _describe_terms(self) -> str:
        return f"Interest Rate: {format_amount(self._interest_rate)}%"


class CheckingAccount(BankAccount):
    """Checking account: may go negative down to the overdraft limit"""

    kind = AccountKind.CHECKING

    def __init__(self, owner: str, initial_balance: Numeric, overdraft_limit: Numeric):
        super().__init__(owner, initial_balance)
        self._overdraft_limit = to_decimal(overdraft_limit)

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    def _check_withdrawal(self, amount: Decimal) -> None:
        if not OverdraftProtection.can_withdraw(self._balance, self._overdraft_limit, amount):
            raise OverdraftExceeded()

    def _describe_terms(self) -> str:
        return f"Overdraft Limit: {format_money(self._overdraft_limit, self._symbol())}"


_ACCOUNT_CLASSES = {
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
}


def create_account(
    kind: Union[AccountKind, str],
    owner: str,
    initial_balance: Numeric,
    variant_param: Numeric = 0
) -> BankAccount:
    """
    Create an account of the given kind

    Args:
        kind: AccountKind or its code ("savings", "checking")
        owner: Owner display name
        initial_balance: Opening balance
        variant_param: Interest rate in percent for savings,
            overdraft limit for checking

    Returns:
        New account

    Raises:
        UnknownAccountKind: If kind is not recognised
    """
    if not isinstance(kind, AccountKind):
        kind = AccountKind.from_code(kind)

    account = _ACCOUNT_CLASSES[kind](owner, initial_balance, variant_param)
    logger.debug(f"Created {kind.code} account for {owner}")
    return account
