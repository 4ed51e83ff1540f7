from pydantic import Field

from splitledger.models.base import FrozenModel


class SettlementTransaction(FrozenModel):
    """Proposed payment from a debtor to a creditor. Derived, never stored."""
    from_user_id: str
    to_user_id: str
    amount_cents: int = Field(gt=0)


class BalanceEntry(FrozenModel):
    """One non-zero pair of the balance matrix: debtor owes creditor amount_cents."""
    creditor_id: str
    debtor_id: str
    amount_cents: int = Field(gt=0)
