"""
Domain Errors

Expected, recoverable rejections of banking operations. The dispatcher
turns these into reported outcomes; only UnknownAccountKind is meant to
reach the caller that creates accounts.
"""


class BankingError(Exception):
    """Base class for all pocket bank domain errors"""


class InsufficientFunds(BankingError):
    """Savings withdrawal larger than the balance"""

    def __init__(self, message: str = "Insufficient funds"):
        super().__init__(message)


class OverdraftExceeded(BankingError):
    """Checking withdrawal larger than balance plus overdraft limit"""

    def __init__(self, message: str = "Overdraft limit exceeded"):
        super().__init__(message)


class UnknownAccountKind(BankingError, ValueError):
    """Account factory was given a kind it does not know"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown account type: {kind!r}")


class AccountNotFound(BankingError, LookupError):
    """No account with the requested owner name"""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(f"Account for {owner!r} not found")


class NotSupported(BankingError):
    """Operation is not available for this account or container"""
