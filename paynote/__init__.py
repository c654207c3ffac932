"""PayNote: a personal ledger of money given to and received from people."""

__version__ = "0.1.0"
