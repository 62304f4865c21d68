from .cap_ledger_entry import CapLedgerEntry

__all__ = ["CapLedgerEntry"]
