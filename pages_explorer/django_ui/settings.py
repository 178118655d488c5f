# /django_ui/settings.py
# This is the settings module for the Django UI of the GitHub Pages Explorer. It defines the
# configuration for the Django project, including installed apps, middleware, and templates.

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-secret")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = ["*"]

ROOT_URLCONF = "pages_explorer.django_ui.urls"

INSTALLED_APPS = [
    "pages_explorer.django_ui",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ]
        },
    }
]

STATIC_URL = "/static/"
USE_TZ = True
