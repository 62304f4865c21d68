from datetime import timedelta
from os import getenv
from pathlib import Path

from box import Box
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool = False) -> bool:  # noqa: FBT001, FBT002
	"""Read a boolean flag from the environment."""  # noqa: DOC201
	value = getenv(name)

	if value is None:
		return default

	return value.strip().lower() in {"1", "true", "yes", "on"}


ENV = Box(
	{
		"SECRET_KEY": getenv("SECRET_KEY", "django-insecure-dynasty-cap-local-key"),
		"DEBUG": _env_bool("DEBUG", default=True),
		"ALLOWED_HOSTS": [host for host in getenv("ALLOWED_HOSTS", "*").split(",") if host],
		"DB_ENGINE": getenv("DB_ENGINE", "django.db.backends.sqlite3"),
		"DB_NAME": getenv("DB_NAME", str(BASE_DIR / "db.sqlite3")),
		"DB_USER": getenv("DB_USER", ""),
		"DB_PASSWORD": getenv("DB_PASSWORD", ""),
		"DB_HOST": getenv("DB_HOST", ""),
		"DB_PORT": getenv("DB_PORT", ""),
		"SEND_SMS_MESSAGES": _env_bool("SEND_SMS_MESSAGES"),
		"CLICKSEND_USERNAME": getenv("CLICKSEND_USERNAME", ""),
		"CLICKSEND_API_KEY": getenv("CLICKSEND_API_KEY", ""),
		"LOG_LEVEL": getenv("LOG_LEVEL", "INFO"),
	},
	frozen_box=True,
)

LEAGUE_SETTINGS = Box(
	{
		"DEFAULT_SALARY_CAP": 500,
		"DEFAULT_TOTAL_ROSTERS": 12,
		"DEFAULT_VETO_FRACTION": 0.5,
		"DEFAULT_VOTE_WINDOW_HOURS": 24,
		# Seasons a cap-space asset may target
		"CAP_YEARS": (2026, 2027, 2028, 2029, 2030),
		"DEFAULT_CAP_YEAR": 2026,
		"DEFAULT_EXPIRES_IN": "24h",
		"EXPIRATION_OFFSETS": {
			"1h": timedelta(hours=1),
			"24h": timedelta(hours=24),
			"2d": timedelta(days=2),
			"1w": timedelta(days=7),
		},
	},
	frozen_box=True,
)

SECRET_KEY = ENV.SECRET_KEY
DEBUG = ENV.DEBUG
ALLOWED_HOSTS = list(ENV.ALLOWED_HOSTS)

INSTALLED_APPS = [
	"django.contrib.admin",
	"django.contrib.auth",
	"django.contrib.contenttypes",
	"django.contrib.sessions",
	"django.contrib.messages",
	"django.contrib.staticfiles",
	"rest_framework",
	"django_filters",
	"core",
	"draft",
	"cap",
	"trade",
]

MIDDLEWARE = [
	"django.middleware.security.SecurityMiddleware",
	"django.contrib.sessions.middleware.SessionMiddleware",
	"django.middleware.common.CommonMiddleware",
	"django.middleware.csrf.CsrfViewMiddleware",
	"django.contrib.auth.middleware.AuthenticationMiddleware",
	"django.contrib.messages.middleware.MessageMiddleware",
	"django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "dynasty.urls"

TEMPLATES = [
	{
		"BACKEND": "django.template.backends.django.DjangoTemplates",
		"DIRS": [],
		"APP_DIRS": True,
		"OPTIONS": {
			"context_processors": [
				"django.template.context_processors.request",
				"django.contrib.auth.context_processors.auth",
				"django.contrib.messages.context_processors.messages",
			],
		},
	},
]

WSGI_APPLICATION = "dynasty.wsgi.application"

DATABASES = {
	"default": {
		"ENGINE": ENV.DB_ENGINE,
		"NAME": ENV.DB_NAME,
		"USER": ENV.DB_USER,
		"PASSWORD": ENV.DB_PASSWORD,
		"HOST": ENV.DB_HOST,
		"PORT": ENV.DB_PORT,
	},
}

AUTH_USER_MODEL = "core.User"

AUTH_PASSWORD_VALIDATORS = [
	{"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
	{"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
	{"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
	{"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
	"DEFAULT_AUTHENTICATION_CLASSES": (
		"rest_framework_simplejwt.authentication.JWTAuthentication",
		"rest_framework.authentication.SessionAuthentication",
	),
	"DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticated",),
	"DEFAULT_FILTER_BACKENDS": (
		"django_filters.rest_framework.DjangoFilterBackend",
		"rest_framework.filters.OrderingFilter",
	),
	"EXCEPTION_HANDLER": "dynasty.common.exceptions.domain_exception_handler",
}

SIMPLE_JWT = {
	"ACCESS_TOKEN_LIFETIME": timedelta(hours=12),
	"REFRESH_TOKEN_LIFETIME": timedelta(days=30),
}

LOGGING = {
	"version": 1,
	"disable_existing_loggers": False,
	"formatters": {
		"verbose": {"format": "{asctime} {levelname} {name}: {message}", "style": "{"},
	},
	"handlers": {
		"console": {"class": "logging.StreamHandler", "formatter": "verbose"},
	},
	"root": {"handlers": ["console"], "level": ENV.LOG_LEVEL},
	"loggers": {
		"django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
	},
}
