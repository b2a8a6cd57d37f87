from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="rkqZs5Fq0h2yJ8mN6xW1cV3bT9uLpEoA4dGiKjHsQwRtYzXvBnMlPoIuYtReWqAs",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]  # noqa: S104

# LOGGING
# ------------------------------------------------------------------------------
LOGGING["loggers"]["item_chat"]["level"] = env(  # noqa: F405
    "DJANGO_LOG_LEVEL",
    default="DEBUG",
)
