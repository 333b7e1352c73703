"""Smoke tests for the Django admin registrations.

Run with: pytest tests/test_admin.py -v
"""

import pytest
from django.contrib import admin

from events.models import TicketType
from transactions.models import Transaction


@pytest.mark.django_db
class TestAdminPages:
    @pytest.mark.parametrize(
        "url",
        [
            "/admin/events/event/",
            "/admin/events/tickettype/",
            "/admin/transactions/transaction/",
        ],
    )
    def test_changelists_render(self, admin_client, make_ticket_type, url):
        make_ticket_type()
        assert admin_client.get(url).status_code == 200

    def test_event_page_lists_ticket_types(self, admin_client, make_ticket_type, event):
        make_ticket_type(name="Balcony")
        response = admin_client.get(f"/admin/events/event/{event.id}/change/")
        assert response.status_code == 200
        assert b"Balcony" in response.content

    def test_stock_is_read_only(self, rf, admin_user, make_ticket_type):
        row = make_ticket_type()
        model_admin = admin.site._registry[TicketType]
        request = rf.get("/")
        request.user = admin_user

        assert "stock" in model_admin.get_readonly_fields(request)
        assert {"stock", "quota"} <= set(model_admin.get_readonly_fields(request, row))

    def test_transactions_cannot_be_added_or_deleted(self, admin_client):
        assert admin_client.get("/admin/transactions/transaction/add/").status_code == 403
        model_admin = admin.site._registry[Transaction]
        assert not model_admin.has_delete_permission(None)
