import attrs


@attrs.define
class TicketSalesOverviewEntity:
    total_tickets: int = 0
    sold_tickets: int = 0
    reserved_tickets: int = 0
    available_tickets: int = 0
    revenue: int = 0  # minor currency units, sold tickets only
