"""
Account Directory Module

Containers of accounts keyed by owner name. Two layouts behave the same
for lookup and differ only in ordering and removal:

- AccountManager keeps insertion order and never removes accounts
- CustomerList prepends each new account and supports removal by name

Owner names are not unique; lookup is a linear scan and the first match wins.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Optional

from .accounts import BankAccount
from .errors import AccountNotFound, NotSupported
from .config import get_config
from .logging_config import get_logger

logger = get_logger("pocket_bank.directory")


class DirectoryLayout(Enum):
    """Container layouts"""
    ARRAY = "array"    # Insertion order, add-only
    LINKED = "linked"  # Newest first, supports removal


class AccountDirectory(ABC):
    """Abstract container of owned accounts"""

    def __init__(self):
        self._accounts: List[BankAccount] = []

    @abstractmethod
    def add(self, account: BankAccount) -> None:
        """Take ownership of an account"""
        pass

    def remove(self, owner: str) -> bool:
        """Remove the first account owned by owner"""
        raise NotSupported(f"{type(self).__name__} does not support removal")

    def find(self, owner: str) -> Optional[BankAccount]:
        """Get the first account owned by owner"""
        for account in self._accounts:
            if account.owner == owner:
                return account
        return None

    def get(self, owner: str) -> BankAccount:
        """Like find(), but raises AccountNotFound on a miss"""
        account = self.find(owner)
        if account is None:
            raise AccountNotFound(owner)
        return account

    def list_all(self) -> List[str]:
        """Display line of every account in container order"""
        return [account.display() for account in self._accounts]

    def __iter__(self) -> Iterator[BankAccount]:
        return iter(list(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, owner: object) -> bool:
        return isinstance(owner, str) and self.find(owner) is not None


class AccountManager(AccountDirectory):
    """Array-backed directory: insertion order, no removal"""

    layout = DirectoryLayout.ARRAY

    def add(self, account: BankAccount) -> None:
        self._accounts.append(account)
        logger.debug(f"Added account for {account.owner}")


class CustomerList(AccountDirectory):
    """List-backed directory: newest account first, removal by name"""

    layout = DirectoryLayout.LINKED

    def add(self, account: BankAccount) -> None:
        self._accounts.insert(0, account)
        logger.debug(f"Added account for {account.owner}")

    def remove(self, owner: str) -> bool:
        for index, account in enumerate(self._accounts):
            if account.owner == owner:
                del self._accounts[index]
                logger.debug(f"Removed account for {owner}")
                return True
        return False


def create_directory(layout: Optional[DirectoryLayout] = None) -> AccountDirectory:
    """
    Create an empty directory

    Args:
        layout: Container layout; defaults to the configured directory_layout

    Returns:
        AccountManager for ARRAY, CustomerList for LINKED
    """
    if layout is None:
        layout = DirectoryLayout(get_config().directory_layout)

    if layout == DirectoryLayout.LINKED:
        return CustomerList()
    return AccountManager()
