"""WSGI config for the fastivalle project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fastivalle.settings")

application = get_wsgi_application()
