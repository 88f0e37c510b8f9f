"""Student Ledger Service.

This service records student financial transactions and lets administrators:
- Add transactions, flagged at write time when an anomaly rule fires
- List every transaction or one student's transactions
- Look up a transaction by ID
- Review flagged transactions and ledger counts
"""

__version__ = "0.1.0"
