"""
Finance Tracker - Source Package

A personal finance ledger that records income and expense
transactions, persists them as a JSON file and reports a running
balance through a numbered text menu.

DESIGN PRINCIPLES:
1. Transactions are append-only and immutable once recorded
2. The whole ledger is rewritten on every change
3. Storage errors surface as exceptions, never as process exits
4. Every load, save and added transaction is audited
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Finance Tracker Team"
