"""
Operation Dispatcher Module

Routes a requested operation to the account owned by the requested name
and returns a structured result. Domain failures (unknown owner, bad
amount, insufficient funds, overdraft, unsupported interest) are reported
in the result; nothing is raised to the caller for them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .accounts import BankAccount
from .currency import Numeric, to_decimal
from .directory import AccountDirectory
from .errors import InsufficientFunds, OverdraftExceeded
from .logging_config import get_logger, log_action

logger = get_logger("pocket_bank.dispatcher")


class Operation(Enum):
    """Operations available on a resolved account"""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    SHOW = "show"
    HISTORY = "history"
    APPLY_INTEREST = "apply_interest"

    @property
    def requires_amount(self) -> bool:
        return self in (Operation.DEPOSIT, Operation.WITHDRAW)

    @classmethod
    def from_choice(cls, choice: str) -> Optional['Operation']:
        """Map a menu letter (D, W, S, H, I; any case) to an operation"""
        return _MENU_CHOICES.get(choice.strip().upper())


_MENU_CHOICES = {
    "D": Operation.DEPOSIT,
    "W": Operation.WITHDRAW,
    "S": Operation.SHOW,
    "H": Operation.HISTORY,
    "I": Operation.APPLY_INTEREST,
}


class OutcomeStatus(Enum):
    """Outcome of a dispatched operation"""
    OK = "ok"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERDRAFT_EXCEEDED = "overdraft_exceeded"
    NOT_SUPPORTED = "not_supported"


class OperationRequest(BaseModel):
    """Parsed operation request from the console layer"""
    owner: str = Field(..., description="Account owner name")
    operation: Operation = Field(..., description="Operation to perform")
    amount: Optional[Decimal] = Field(None, description="Amount for deposit/withdraw")


@dataclass
class OperationResult:
    """Result of a dispatched operation"""
    status: OutcomeStatus
    message: str = ""
    lines: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status == OutcomeStatus.OK


ACCOUNT_NOT_FOUND_MESSAGE = "Account not found."
INVALID_AMOUNT_MESSAGE = "Amount must be greater than zero."
NOT_SUPPORTED_MESSAGE = "This account does not support interest calculation."


def dispatch(directory: AccountDirectory, request: OperationRequest) -> OperationResult:
    """Dispatch a validated request"""
    return perform_operation(directory, request.owner, request.operation, request.amount)


def perform_operation(
    directory: AccountDirectory,
    owner: str,
    operation: Operation,
    amount: Optional[Numeric] = None
) -> OperationResult:
    """
    Perform an operation on the account owned by owner

    Args:
        directory: Directory to resolve the owner in
        owner: Account owner name (first match wins)
        operation: Requested operation
        amount: Amount for deposit and withdraw; ignored otherwise

    Returns:
        OperationResult describing what happened
    """
    account = directory.find(owner)
    if account is None:
        return _report(operation, owner, OutcomeStatus.ACCOUNT_NOT_FOUND, ACCOUNT_NOT_FOUND_MESSAGE)

    if operation.requires_amount:
        value = to_decimal(amount) if amount is not None else None
        if value is None or not value.is_finite() or value <= 0:
            return _report(operation, owner, OutcomeStatus.INVALID_AMOUNT, INVALID_AMOUNT_MESSAGE)
        if operation == Operation.DEPOSIT:
            return _deposit(account, value)
        return _withdraw(account, value)

    if operation == Operation.SHOW:
        return OperationResult(OutcomeStatus.OK, lines=[account.display()])

    if operation == Operation.HISTORY:
        return OperationResult(
            OutcomeStatus.OK,
            lines=account.display_transaction_history().split("\n")
        )

    return _apply_interest(account)


def _deposit(account: BankAccount, amount: Decimal) -> OperationResult:
    account.deposit(amount)
    return _report(Operation.DEPOSIT, account.owner, OutcomeStatus.OK,
                   "Deposit successful.", amount=amount, balance=account.balance)


def _withdraw(account: BankAccount, amount: Decimal) -> OperationResult:
    try:
        account.withdraw(amount)
    except InsufficientFunds as e:
        return _report(Operation.WITHDRAW, account.owner, OutcomeStatus.INSUFFICIENT_FUNDS,
                       f"Error: {e}", amount=amount, balance=account.balance)
    except OverdraftExceeded as e:
        return _report(Operation.WITHDRAW, account.owner, OutcomeStatus.OVERDRAFT_EXCEEDED,
                       f"Error: {e}", amount=amount, balance=account.balance)

    return _report(Operation.WITHDRAW, account.owner, OutcomeStatus.OK,
                   "Withdrawal successful.", amount=amount, balance=account.balance)


def _apply_interest(account: BankAccount) -> OperationResult:
    interest_bearing = account.as_interest_bearing()
    if interest_bearing is None:
        return _report(Operation.APPLY_INTEREST, account.owner,
                       OutcomeStatus.NOT_SUPPORTED, NOT_SUPPORTED_MESSAGE)

    interest = interest_bearing.apply_interest()
    return _report(Operation.APPLY_INTEREST, account.owner, OutcomeStatus.OK,
                   "Interest applied.", amount=interest, balance=account.balance)


def _report(operation: Operation, owner: str, status: OutcomeStatus, message: str,
            amount: Optional[Decimal] = None, balance: Optional[Decimal] = None) -> OperationResult:
    """Log the outcome and wrap it in a result"""
    details = {"status": status.value}
    if amount is not None:
        details["amount"] = str(amount)
    if balance is not None:
        details["balance"] = str(balance)

    level = "info" if status == OutcomeStatus.OK else "warning"
    log_action(logger, level, message, action=operation.value, resource=owner, details=details)

    return OperationResult(status, message)
