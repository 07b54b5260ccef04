# accounting/services/__init__.py

"""
Accounting services.

- ledger.py                : pure posting arithmetic (no storage, no models)
- journal_entry_service.py : the only place journal entries are posted from
"""
