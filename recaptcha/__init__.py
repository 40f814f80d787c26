"""Server-side verification of reCAPTCHA response tokens."""

__version__ = "1.0.0"

from recaptcha.client import API_URL, DEFAULT_TIMEOUT, ReCaptcha, VerificationResult
from recaptcha.exceptions import (
    BodyReadError,
    ParseError,
    RecaptchaError,
    TransportError,
    VerificationRejected,
)

__all__ = [
    "ReCaptcha",
    "VerificationResult",
    # Errors
    "RecaptchaError",
    "TransportError",
    "BodyReadError",
    "ParseError",
    "VerificationRejected",
    # Constants
    "API_URL",
    "DEFAULT_TIMEOUT",
]
