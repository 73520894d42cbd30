import os
import sys
from pathlib import Path
import environ
import yaml

# Initialize environment variables
env = environ.Env()

# Reading .env file
environ.Env.read_env(".env")

# Helper function to read Docker secrets from files
def read_secret(env_var_name, file_env_var_name, default=""):
    """Read secret from file if *_FILE env var exists, otherwise from env var."""
    secret_file = os.environ.get(file_env_var_name)
    if secret_file and os.path.exists(secret_file):
        with open(secret_file, 'r') as f:
            return f.read().strip()
    return env(env_var_name, default=default)

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "campus" / "config"

# Load application configuration
def load_app_config():
    config_path = CONFIG_DIR / "application.yml"
    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}

APP_CONFIG = load_app_config()

# Discord bot REST API
DISCORD_CONFIG = {
    'api_base_url': env('DISCORD_API_BASE_URL', default=APP_CONFIG.get('discord', {}).get('api_base_url', 'https://discord.com/api/v10')),
    'timeout': env.int('DISCORD_API_TIMEOUT', default=APP_CONFIG.get('discord', {}).get('timeout', 10)),
}

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = read_secret("SECRET_KEY", "SECRET_KEY_FILE", default="unsafe-secret-key")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env.bool("DEBUG", default=False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

# CSRF Configuration - Django 4.0+ requires explicit trusted origins
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[])

INTERNAL_IPS = env.list("INTERNAL_IPS", default=["localhost"])

# Test environment detection
TESTING = len(sys.argv) > 1 and sys.argv[1] == 'test' or os.environ.get('TESTING', 'False').lower() == 'true'


# Application definition
INSTALLED_APPS = [
    "campus",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "graphene_django",
    "django_celery_results",
]

# User model
AUTH_USER_MODEL = "campus.User"

# Celery
CELERY_BROKER_URL = env('CELERY_BROKER_URL', default="redis://127.0.0.1:6379/0")
CELERY_RESULT_BACKEND = "django-db"

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "campus.middleware.current_school.CurrentSchoolMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

SESSION_COOKIE_AGE = env.int("SESSION_COOKIE_AGE", default=14 * 24 * 3600)
SESSION_COOKIE_HTTPONLY = True  # Security: prevent JavaScript access
SESSION_COOKIE_SECURE = env.bool("SESSION_COOKIE_SECURE", default=not DEBUG)  # HTTPS only in production

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

LOGIN_URL = '/sign-in'
LOGIN_REDIRECT_URL = '/'
LOGOUT_REDIRECT_URL = '/'

ROOT_URLCONF = "campus.urls"

APPEND_SLASH = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            BASE_DIR / "templates",
        ],
        "APP_DIRS": False,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "campus.context_processors.current_school",
                "campus.context_processors.url_name",
                "campus.context_processors.features",
            ],
            "loaders": [
                (
                    "django.template.loaders.cached.Loader",
                    [
                        "django.template.loaders.filesystem.Loader",
                        "django.template.loaders.app_directories.Loader",
                    ],
                )
            ],
        },
    },
]

WSGI_APPLICATION = "campus.wsgi.application"

# GraphQL
GRAPHENE = {
    "SCHEMA": "campus.api.schema.schema",
}

# Database
# https://docs.djangoproject.com/en/5.1/ref/settings/#databases

DATABASES = {
    "default": {
        "NAME": env("DB_NAME", default="campus"),
        "ENGINE": env("DB_ENGINE", default="django.db.backends.postgresql"),
        "HOST": env("DB_HOST", default="127.0.0.1"),
        "PORT": env("DB_PORT", default="5432"),
        "USER": env("DB_USER", default="postgres"),
        "PASSWORD": read_secret("DB_PASSWORD", "DATABASE_PASSWORD_FILE", default=""),
        "CONN_MAX_AGE": env.int("DB_CONN_MAX_AGE", default=0),
        "CONN_HEALTH_CHECKS": True,
    }
}

# Use SQLite for testing to avoid database permission issues
if TESTING:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
            "CONN_MAX_AGE": 0,
        }
    }

# Password validation
# https://docs.djangoproject.com/en/5.1/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]


# Internationalization
# https://docs.djangoproject.com/en/5.1/topics/i18n/

LANGUAGE_CODE = "en-us"

TIME_ZONE = env("TIME_ZONE", default="UTC")

USE_I18N = True

USE_TZ = True

# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.1/howto/static-files/

STATIC_URL = "static/"
STATIC_ROOT = env('STATIC_ROOT', default=str(BASE_DIR / 'staticfiles'))

STATICFILES_FINDERS = [
    "django.contrib.staticfiles.finders.FileSystemFinder",
    "django.contrib.staticfiles.finders.AppDirectoriesFinder",
]

# Default primary key field type
# https://docs.djangoproject.com/en/5.1/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ==========================================
# LOGGING CONFIGURATION
# ==========================================

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple' if TESTING else 'verbose',
        },
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'root': {
        'handlers': ['null' if TESTING else 'console'],
        'level': 'CRITICAL' if TESTING else 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['null' if TESTING else 'console'],
            'level': 'CRITICAL' if TESTING else 'INFO',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['null'],
            'level': 'CRITICAL',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['null' if TESTING else 'console'],
            'level': 'CRITICAL' if TESTING else 'ERROR',
            'propagate': False,
        },
        'campus': {
            'handlers': ['null' if TESTING else 'console'],
            'level': 'CRITICAL' if TESTING else env('CAMPUS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
        'campus.views': {
            'handlers': ['null' if TESTING else 'console'],
            'level': 'CRITICAL' if TESTING else env('CAMPUS_VIEWS_LOG_LEVEL', default='WARNING'),
            'propagate': False,
        },
        'celery': {
            'handlers': ['null' if TESTING else 'console'],
            'level': 'CRITICAL' if TESTING else 'WARNING',
            'propagate': False,
        },
        'urllib3': {
            'handlers': ['null'],
            'level': 'CRITICAL',
            'propagate': False,
        },
        'requests': {
            'handlers': ['null'],
            'level': 'CRITICAL',
            'propagate': False,
        },
    }
}

if TESTING:
    # Disable database migration output
    MIGRATION_MODULES = {
        'campus': None,
        'auth': None,
        'contenttypes': None,
        'sessions': None,
        'admin': None,
        'messages': None,
        'staticfiles': None,
        'django_celery_results': None,
    }
