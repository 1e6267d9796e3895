"""
Ledger Master: supplier/ledger account entry backed by a thin REST API
"""

__version__ = "1.0.0"
