"""Checkout orchestration.

A checkout reads the ticket type, prices the order, reserves stock with a
conditional decrement and records a pending transaction. The reservation
and the record are written in one atomic block, so a failed insert rolls
the reservation back. Once the record exists, a failure to obtain a payment
handle fails the transaction, which returns its stock.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from django.utils.translation import gettext_lazy as _

from common.clock import utcnow
from common.errors import InvalidInputError
from events.domain import Quantity
from events.domain.errors import InsufficientStockError, TicketNotFoundError, TicketNotOnSaleError
from events.services.ticket_service import parse_ticket_id
from events.stores.interfaces import TicketStore
from transactions.domain import MAX_TOTAL_PRICE, Transaction
from transactions.services.ledger import TransactionLedger
from transactions.services.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHOD = "bank_transfer"


def parse_quantity(quantity) -> Quantity:
    if isinstance(quantity, str) and quantity.strip().isdigit():
        quantity = int(quantity)
    try:
        return Quantity(quantity)
    except ValueError:
        raise InvalidInputError(_("Quantity must be a positive integer.")) from None


class CheckoutService:
    """Service for the purchase flow."""

    def __init__(
        self,
        tickets: TicketStore,
        ledger: TransactionLedger,
        gateway: PaymentGateway,
        default_payment_method: str = DEFAULT_PAYMENT_METHOD,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._tickets = tickets
        self._ledger = ledger
        self._gateway = gateway
        self._default_payment_method = default_payment_method
        self._clock = clock

    def checkout(
        self,
        user_id: str,
        ticket_id: str,
        quantity,
        payment_method: str | None = None,
    ) -> Transaction:
        """Reserve stock and open a pending transaction with a payment handle.

        Raises:
            InvalidInputError: If quantity is not a positive integer or the
                order total is too large to record.
            TicketNotFoundError: If the ticket type does not exist.
            TicketNotOnSaleError: If the ticket type is disabled or outside its sales window.
            InsufficientStockError: If fewer than ``quantity`` units remain.
        """
        units = parse_quantity(quantity)
        ticket = self._tickets.get_ticket_type(parse_ticket_id(ticket_id))
        if ticket is None:
            raise TicketNotFoundError()
        if not ticket.is_on_sale(self._clock()):
            raise TicketNotOnSaleError()
        if not ticket.can_cover(units.value):
            raise InsufficientStockError()

        total_price = ticket.price.times(units.value)
        if total_price.amount > MAX_TOTAL_PRICE:
            raise InvalidInputError(_("Order total exceeds the maximum amount allowed."))

        with self._ledger.atomic():
            # The decrement re-checks stock in the same statement; losing a
            # race here means another checkout took the last units.
            if not self._tickets.reserve_stock(ticket.id, units.value):
                raise InsufficientStockError()
            transaction = self._ledger.open(
                user_id=user_id,
                ticket=ticket,
                quantity=units,
                total_price=total_price,
                payment_method=payment_method or self._default_payment_method,
            )

        logger.info(
            "Reserved %d unit(s) of ticket %s for user %s in transaction %s",
            units.value,
            ticket.id,
            user_id,
            transaction.id,
        )

        try:
            details = self._gateway.create_payment(transaction)
            self._ledger.attach_payment_details(transaction.id, details)
        except Exception:
            logger.exception("Payment intent failed for transaction %s; releasing stock", transaction.id)
            self._ledger.fail(transaction)
            raise

        return replace(transaction, payment_details=details)
