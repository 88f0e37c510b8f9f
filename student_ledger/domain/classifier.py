"""Anomaly classification for ledger transactions.

Rules look only at the transaction being recorded, never at history:

- tuition above ``TUITION_THRESHOLD``
- grant above ``GRANT_MAX``
- any negative amount

Any single match flags the transaction. Thresholds are strict, so a tuition
payment of exactly 50000.00 is not flagged.
"""

from decimal import Decimal
from enum import Enum

TUITION_THRESHOLD = Decimal("50000.00")
GRANT_MAX = Decimal("10000.00")


class AnomalyRule(str, Enum):
    TUITION_CEILING = "TUITION_CEILING"
    GRANT_CEILING = "GRANT_CEILING"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"


def matched_rules(type: str, amount: Decimal) -> list[AnomalyRule]:
    """Return the rules that fire for a transaction, in rule order."""
    category = type.lower()
    rules: list[AnomalyRule] = []

    if category == "tuition" and amount > TUITION_THRESHOLD:
        rules.append(AnomalyRule.TUITION_CEILING)
    if category == "grant" and amount > GRANT_MAX:
        rules.append(AnomalyRule.GRANT_CEILING)
    if amount < 0:
        rules.append(AnomalyRule.NEGATIVE_AMOUNT)

    return rules


def classify(type: str, amount: Decimal) -> bool:
    """Return True when the transaction is anomalous."""
    return bool(matched_rules(type, amount))
