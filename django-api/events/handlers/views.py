"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to common.exceptions
- Never contain business logic
"""

from django.utils.translation import gettext as _
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.errors import InvalidInputError
from common.permissions import ORGANIZER_ROLES, role_required
from events.handlers.serializers import (
    TicketTypeCreateSerializer,
    TicketTypeSerializer,
    TicketTypeUpdateSerializer,
)
from events.services import TicketService
from events.stores import DjangoEventStore, DjangoTicketStore


def get_ticket_service() -> TicketService:
    return TicketService(DjangoEventStore(), DjangoTicketStore())


class OrganizerWritesMixin:
    """Reads are public; writes need an organizer or admin."""

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [AllowAny()]
        return [role_required(*ORGANIZER_ROLES)()]


class TicketListView(OrganizerWritesMixin, APIView):
    """Handler for GET/POST /api/tickets"""

    def get(self, request: Request) -> Response:
        event_id = request.query_params.get("event_id")
        if not event_id:
            raise InvalidInputError(_("The event_id query parameter is required."))
        tickets = get_ticket_service().list_ticket_types(event_id)
        return Response(TicketTypeSerializer(tickets, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = TicketTypeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket = get_ticket_service().create_ticket_type(**serializer.validated_data)
        return Response(
            {"message": _("Ticket created."), "data": TicketTypeSerializer(ticket).data},
            status=status.HTTP_201_CREATED,
        )


class TicketDetailView(OrganizerWritesMixin, APIView):
    """Handler for GET/PUT/PATCH/DELETE /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        ticket = get_ticket_service().get_ticket_type(ticket_id)
        return Response(TicketTypeSerializer(ticket).data)

    def put(self, request: Request, ticket_id: str) -> Response:
        serializer = TicketTypeUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        ticket = get_ticket_service().update_ticket_type(ticket_id, serializer.validated_data)
        return Response({"message": _("Ticket updated."), "data": TicketTypeSerializer(ticket).data})

    patch = put

    def delete(self, request: Request, ticket_id: str) -> Response:
        get_ticket_service().delete_ticket_type(ticket_id)
        return Response({"message": _("Ticket deleted."), "id": ticket_id})
