"""
Pocket Bank

An in-memory banking core with savings and checking accounts,
exact Decimal arithmetic, and a per-account transaction history.
"""

__version__ = "1.0.0"
