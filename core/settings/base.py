"""
Shared settings for every environment.

Environment modules (local, prod) star-import this file and override the
database and host settings. On its own it runs against SQLite, which is what
the test suite uses.
"""
from pathlib import Path
from decouple import config, Csv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = config("SECRET_KEY", default="insecure-base-key-change-me")
DEBUG = config("DEBUG", cast=bool, default=False)
ALLOWED_HOSTS = config("DJANGO_ALLOWED_HOSTS", cast=Csv(), default="localhost,127.0.0.1,testserver")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    "strawberry_django",
    "apps.customers",
    "apps.events",
    "apps.segments",
    "apps.campaigns",
    "apps.smart_assist",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "core.urls"
WSGI_APPLICATION = "core.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": config("SQLITE_PATH", default=str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

STATIC_URL = "static/"

CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS",
    cast=Csv(),
    default="http://localhost:3000,http://127.0.0.1:3000"
)

# The API has no user accounts; every endpoint is open.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Customer Events & Campaigns API",
    "DESCRIPTION": "Event ingestion, rule-based segments and campaign drafting",
    "VERSION": "1.0.0",
}

# Segments
SEGMENT_PREVIEW_LIMIT = config("SEGMENT_PREVIEW_LIMIT", cast=int, default=50)
SEGMENT_SLOW_QUERY_SECONDS = config("SEGMENT_SLOW_QUERY_SECONDS", cast=float, default=1.0)

# Campaigns
DRAFT_EVENT_WINDOW_DAYS = config("DRAFT_EVENT_WINDOW_DAYS", cast=int, default=30)
CAMPAIGN_DELIVERY_BACKEND = config(
    "CAMPAIGN_DELIVERY_BACKEND",
    default="apps.campaigns.delivery.SimulatedDeliveryBackend"
)

SMART_ASSIST = {
    "SEGMENT_PROVIDER": config(
        "SMART_ASSIST_SEGMENT_PROVIDER",
        default="apps.smart_assist.providers.mock.MockSegmentDefinitionProvider"
    ),
    "DRAFT_PROVIDER": config(
        "SMART_ASSIST_DRAFT_PROVIDER",
        default="apps.smart_assist.providers.mock.MockEmailDraftProvider"
    ),
}

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
