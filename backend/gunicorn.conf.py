import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shelter.settings")
import django  # noqa: E402

django.setup()

from django.conf import settings  # noqa: E402

wsgi_app = "shelter.wsgi:application"
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.environ.get("GUNICORN_WORKERS", "2"))

# Disable Gunicorn's default handlers (stdout/stderr); logconfig_dict replaces them
errorlog = "-"
accesslog = "-"
loglevel = "info"
capture_output = True

# Gunicorn applies dictConfig; Django's LOGGING replaces its handlers
logconfig_dict = settings.LOGGING
