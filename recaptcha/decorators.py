import logging
from functools import wraps

from rest_framework import status
from rest_framework.response import Response

from .conf import get_client, get_token_field
from .exceptions import RecaptchaError, VerificationRejected
from .utils import get_client_ip

logger = logging.getLogger(__name__)


def require_recaptcha(view_func=None, *, field=None):
    """Decorator that validates a reCAPTCHA token before allowing the view to proceed.

    Applies to DRF view methods. The token is read from request.data under
    ``field``, or RECAPTCHA_TOKEN_FIELD when not given.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(self, request, *args, **kwargs):
            token = request.data.get(field or get_token_field())
            if not token:
                return Response(
                    {"detail": "reCAPTCHA token is required."},
                    status=status.HTTP_400_BAD_REQUEST,
                )

            try:
                get_client().verify(token, client_ip=get_client_ip(request))
            except VerificationRejected as e:
                return Response(
                    {"detail": "Bot verification failed.", "code": e.code},
                    status=status.HTTP_403_FORBIDDEN,
                )
            except RecaptchaError as e:
                logger.error(f"reCAPTCHA verification unavailable for {request.path}: {e}")
                return Response(
                    {"detail": "reCAPTCHA verification is unavailable."},
                    status=status.HTTP_503_SERVICE_UNAVAILABLE,
                )

            return func(self, request, *args, **kwargs)

        return wrapper

    if view_func is not None:
        return decorator(view_func)
    return decorator
