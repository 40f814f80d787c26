"""Errors raised while verifying a reCAPTCHA token.

All of them inherit from RecaptchaError so callers can catch one type.
"""


class RecaptchaError(Exception):
    """Base exception for all verification failures."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class TransportError(RecaptchaError):
    """Raised when the POST to the verification endpoint fails or times out"""
    pass


class BodyReadError(RecaptchaError):
    """Raised when the response body cannot be read"""
    pass


class ParseError(RecaptchaError):
    """Raised when the response body is not the expected JSON object"""
    pass


class VerificationRejected(RecaptchaError):
    """Raised when the service reports a failure with at least one error code.

    The message is the first error code; the full list is kept on error_codes.
    """

    def __init__(self, error_codes):
        super().__init__(error_codes[0])
        self.code = error_codes[0]
        self.error_codes = list(error_codes)
