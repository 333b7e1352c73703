from events.handlers.views import TicketDetailView, TicketListView

__all__ = ["TicketListView", "TicketDetailView"]
