"""
Core domain models, amount arithmetic, and instruction contracts.

This module contains the foundational building blocks of asset
reconciliation that are independent of the host ledger runtime.
"""
