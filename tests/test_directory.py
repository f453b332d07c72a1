"""
Test suite for directory module

Tests lookup, ordering, removal, and duplicate-owner behaviour for both
directory layouts.
"""

import pytest

from pocket_bank.accounts import SavingsAccount, CheckingAccount, create_account
from pocket_bank.directory import (
    AccountDirectory, AccountManager, CustomerList, DirectoryLayout, create_directory
)
from pocket_bank.errors import AccountNotFound, NotSupported


def _seed(directory: AccountDirectory) -> AccountDirectory:
    directory.add(create_account("savings", "Laurie", 5000, 2.5))
    directory.add(create_account("checking", "Larry", 1000, 500))
    directory.add(create_account("savings", "David", 10000, 2.5))
    directory.add(create_account("checking", "Luis", 2000, 500))
    return directory


@pytest.mark.parametrize("directory_cls", [AccountManager, CustomerList])
class TestCommonBehaviour:
    """Behaviour shared by every layout"""

    def test_find_after_add(self, directory_cls):
        directory = directory_cls()
        account = SavingsAccount("Alice", 100, 1)
        directory.add(account)
        assert directory.find("Alice") is account

    def test_find_missing(self, directory_cls):
        directory = _seed(directory_cls())
        assert directory.find("Nobody") is None

    def test_get_missing_raises(self, directory_cls):
        directory = _seed(directory_cls())
        with pytest.raises(AccountNotFound) as exc_info:
            directory.get("Nobody")
        assert exc_info.value.owner == "Nobody"

    def test_lookup_is_case_sensitive(self, directory_cls):
        directory = _seed(directory_cls())
        assert directory.find("laurie") is None

    def test_len_and_contains(self, directory_cls):
        directory = _seed(directory_cls())
        assert len(directory) == 4
        assert "Larry" in directory
        assert "Nobody" not in directory

    def test_empty_directory(self, directory_cls):
        directory = directory_cls()
        assert len(directory) == 0
        assert directory.list_all() == []


class TestAccountManager:
    """Array layout"""

    def test_list_all_in_insertion_order(self):
        directory = _seed(AccountManager())
        assert directory.list_all() == [
            "Savings Account: Laurie | Balance: $5000.00 | Interest Rate: 2.50%",
            "Checking Account: Larry | Balance: $1000.00 | Overdraft Limit: $500.00",
            "Savings Account: David | Balance: $10000.00 | Interest Rate: 2.50%",
            "Checking Account: Luis | Balance: $2000.00 | Overdraft Limit: $500.00",
        ]

    def test_iteration_order(self):
        directory = _seed(AccountManager())
        assert [a.owner for a in directory] == ["Laurie", "Larry", "David", "Luis"]

    def test_duplicate_owner_first_added_wins(self):
        directory = AccountManager()
        first = SavingsAccount("Sam", 100, 1)
        second = CheckingAccount("Sam", 200, 50)
        directory.add(first)
        directory.add(second)
        assert directory.find("Sam") is first
        assert len(directory) == 2

    def test_remove_not_supported(self):
        directory = _seed(AccountManager())
        with pytest.raises(NotSupported):
            directory.remove("Laurie")
        assert directory.find("Laurie") is not None


class TestCustomerList:
    """Prepend layout with removal"""

    def test_list_all_newest_first(self):
        directory = _seed(CustomerList())
        assert [line.split(" | ")[0] for line in directory.list_all()] == [
            "Checking Account: Luis",
            "Savings Account: David",
            "Checking Account: Larry",
            "Savings Account: Laurie",
        ]

    def test_duplicate_owner_last_added_wins(self):
        """Prepending means the newest duplicate is encountered first"""
        directory = CustomerList()
        first = SavingsAccount("Sam", 100, 1)
        second = CheckingAccount("Sam", 200, 50)
        directory.add(first)
        directory.add(second)
        assert directory.find("Sam") is second

    def test_remove(self):
        directory = _seed(CustomerList())
        assert directory.remove("Larry") is True
        assert directory.find("Larry") is None
        assert len(directory) == 3
        assert [a.owner for a in directory] == ["Luis", "David", "Laurie"]

    def test_remove_head_and_tail(self):
        directory = _seed(CustomerList())
        assert directory.remove("Luis")
        assert directory.remove("Laurie")
        assert [a.owner for a in directory] == ["David", "Larry"]

    def test_remove_missing(self):
        directory = _seed(CustomerList())
        assert directory.remove("Nobody") is False
        assert len(directory) == 4

    def test_remove_only_first_duplicate(self):
        directory = CustomerList()
        older = SavingsAccount("Sam", 100, 1)
        newer = SavingsAccount("Sam", 200, 1)
        directory.add(older)
        directory.add(newer)
        assert directory.remove("Sam")
        assert directory.find("Sam") is older
        assert directory.remove("Sam")
        assert directory.find("Sam") is None

    def test_iterating_while_removing(self):
        directory = _seed(CustomerList())
        for account in directory:
            directory.remove(account.owner)
        assert len(directory) == 0


class TestCreateDirectory:
    """Test directory factory"""

    def test_explicit_layouts(self):
        assert isinstance(create_directory(DirectoryLayout.ARRAY), AccountManager)
        assert isinstance(create_directory(DirectoryLayout.LINKED), CustomerList)

    def test_default_layout_is_array(self):
        assert isinstance(create_directory(), AccountManager)

    def test_layout_attribute(self):
        assert AccountManager.layout == DirectoryLayout.ARRAY
        assert CustomerList.layout == DirectoryLayout.LINKED
