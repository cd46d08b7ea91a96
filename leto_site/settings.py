import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "leto.apps.LetoConfig",
    "django.contrib.contenttypes",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "leto.context_processors.leto_today",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_PATH", str(BASE_DIR / "db_dev.sqlite3")),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Leto calendars
LETO_DEFAULT_LOCALE = os.getenv("LETO_DEFAULT_LOCALE", "bg")
# "Today" starts this many hours ahead of UTC.
LETO_UTC_OFFSET_HOURS = int(os.getenv("LETO_UTC_OFFSET_HOURS", "2"))
LETO_CALENDARS = {
    "bulgarian": "leto.calendars.bulgarian.BULGARIAN",
    "gregorian": "leto.calendars.gregorian.GREGORIAN",
}
