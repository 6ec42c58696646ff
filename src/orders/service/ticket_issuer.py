"""Issuing individual tickets for order lines."""

from accounts.models import FastivalleUser
from orders.models import Order, OrderItem, Ticket


class TicketIssuer:
    """Emits one ticket per unit of quantity, numbered across the whole order.

    The running counter is shared by all lines of the order and only advances
    for tickets that were actually written, so numbers stay gap-free.
    """

    def __init__(self, order: Order, purchaser: FastivalleUser) -> None:
        self.order = order
        self.purchaser = purchaser
        self.issued = 0

    def ticket_number(self, sequence: int) -> str:
        return f"TKT-{self.order.order_number}-{sequence}"

    def qr_code(self, sequence: int) -> str:
        return f"QR-{self.order.order_number}-{sequence}"

    def issue(self, order_item: OrderItem) -> list[Ticket]:
        """Create ``order_item.quantity`` valid tickets.

        Only the very first ticket of the order is assigned to the purchaser;
        the rest stay unassigned until someone claims them.
        """
        tickets = []
        for offset in range(1, order_item.quantity + 1):
            sequence = self.issued + offset
            ticket = Ticket(
                order_item=order_item,
                sequence=sequence,
                ticket_number=self.ticket_number(sequence),
                qr_code=self.qr_code(sequence),
                status=Ticket.TicketStatus.VALID,
                assigned_to=self.purchaser if sequence == 1 else None,
            )
            # FKs are known to exist, skip the per-row lookups full_clean would do
            ticket.clean_fields(exclude=["order_item", "assigned_to"])
            tickets.append(ticket)

        created = Ticket.objects.bulk_create(tickets)
        self.issued += len(created)
        return created
