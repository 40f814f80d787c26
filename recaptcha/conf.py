"""Client configuration from Django settings."""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .client import API_URL, DEFAULT_TIMEOUT, ReCaptcha

DEFAULT_TOKEN_FIELD = "g-recaptcha-response"


def get_client():
    """Build a ReCaptcha client from the RECAPTCHA_* settings.

    Settings are read on every call, so overridden settings apply
    immediately.
    """
    secret_key = getattr(settings, "RECAPTCHA_SECRET_KEY", None)
    if secret_key is None:
        raise ImproperlyConfigured("RECAPTCHA_SECRET_KEY must be set to verify reCAPTCHA tokens.")

    return ReCaptcha(
        secret_key,
        verify_url=getattr(settings, "RECAPTCHA_VERIFY_URL", API_URL),
        timeout=getattr(settings, "RECAPTCHA_TIMEOUT", DEFAULT_TIMEOUT),
    )


def get_token_field():
    return getattr(settings, "RECAPTCHA_TOKEN_FIELD", DEFAULT_TOKEN_FIELD)
