import logging

from splitledger.core.errors import InvalidInput
from splitledger.models.payment import Payment
from splitledger.repositories.balance_ledger import BalanceLedger

logger = logging.getLogger(__name__)


class PaymentRecorder:
    """Applies a direct peer-to-peer payment to a ledger, independent of any expense."""

    @staticmethod
    def validate(payment: Payment) -> None:
        """
        Rules:
        - amount_cents must be a positive integer
        - payer and payee must differ

        User existence is the caller's responsibility.
        """
        amount = payment.amount_cents
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidInput("Payment amount must be positive", {"amount_cents": amount})
        if payment.payer_id == payment.payee_id:
            raise InvalidInput("Cannot record a payment to oneself", {"user_id": payment.payer_id})

    def record(self, ledger: BalanceLedger, payment: Payment) -> Payment:
        self.validate(payment)
        ledger.apply_payment(payment)
        logger.debug("Recorded payment %s in group %s", payment.id, ledger.group_id)
        return payment
