"""Django Unfold admin configuration."""

from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _

from .base import SITE_NAME, VERSION

UNFOLD = {
    "SITE_TITLE": f"{SITE_NAME} v{VERSION} Admin",
    "SITE_HEADER": f"{SITE_NAME} v{VERSION} Administration",
    "SITE_URL": "/",
    "SHOW_HISTORY": True,
    "COLORS": {
        "primary": {
            "50": "255 247 237",
            "100": "255 237 213",
            "200": "254 215 170",
            "300": "253 186 116",
            "400": "251 146 60",
            "500": "232 125 43",
            "600": "234 88 12",
            "700": "194 65 12",
            "800": "154 52 18",
            "900": "124 45 18",
            "950": "67 20 7",
        },
    },
    "SIDEBAR": {
        "show_search": True,
        "show_all_applications": False,
        "navigation": [
            {
                "title": _("Catalog"),
                "separator": True,
                "items": [
                    {"title": _("Events"), "link": reverse_lazy("admin:events_event_changelist")},
                    {"title": _("Ticket types"), "link": reverse_lazy("admin:events_tickettype_changelist")},
                ],
            },
            {
                "title": _("Sales"),
                "separator": True,
                "items": [
                    {"title": _("Orders"), "link": reverse_lazy("admin:orders_order_changelist")},
                    {"title": _("Tickets"), "link": reverse_lazy("admin:orders_ticket_changelist")},
                ],
            },
            {
                "title": _("Users"),
                "separator": True,
                "items": [
                    {"title": _("Users"), "link": reverse_lazy("admin:accounts_fastivalleuser_changelist")},
                ],
            },
        ],
    },
}
