"""
Account Policy Module

Stateless rules shared by the account types: interest calculation for
savings products and overdraft checks for checking products.
"""

from decimal import Decimal

HUNDRED = Decimal('100')


class InterestCalculator:
    """Simple (non-compounding) interest on the current balance"""

    @staticmethod
    def calculate_interest(balance: Decimal, rate: Decimal) -> Decimal:
        """
        Interest earned for one application

        Args:
            balance: Current account balance
            rate: Interest rate in percent (2.5 means 2.5%)

        Returns:
            balance * rate / 100, unrounded
        """
        return balance * (rate / HUNDRED)


class OverdraftProtection:
    """Overdraft rule for accounts that may go below zero"""

    @staticmethod
    def can_withdraw(balance: Decimal, overdraft_limit: Decimal, amount: Decimal) -> bool:
        """Check that amount stays within balance plus the overdraft limit"""
        return amount <= balance + overdraft_limit
