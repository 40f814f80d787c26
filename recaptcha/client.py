import json
import logging
import time
from dataclasses import dataclass
from typing import Tuple

import requests

from .exceptions import BodyReadError, ParseError, TransportError, VerificationRejected

logger = logging.getLogger(__name__)

API_URL = "https://www.google.com/recaptcha/api/siteverify"
DEFAULT_TIMEOUT = 20

# Bytes per read while draining the body, so the deadline is checked as data arrives
READ_CHUNK_SIZE = 1


@dataclass(frozen=True)
class VerificationResult:
    """Decoded body of a siteverify response."""

    success: bool
    error_codes: Tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data):
        """Build a result from decoded JSON, raising ParseError on an unexpected shape."""
        if not isinstance(data, dict):
            raise ParseError("Response body is not a JSON object", {"type": type(data).__name__})

        success = data.get("success", False)
        if not isinstance(success, bool):
            raise ParseError("Field 'success' is not a boolean", {"success": success})

        error_codes = data.get("error-codes") or []
        if not isinstance(error_codes, list) or not all(isinstance(c, str) for c in error_codes):
            raise ParseError("Field 'error-codes' is not a list of strings", {"error-codes": error_codes})

        return cls(success=success, error_codes=tuple(error_codes))


class ReCaptcha:
    """Verifies reCAPTCHA response tokens against the siteverify endpoint.

    The client only holds its configuration, so one instance can be shared
    between threads and reused for any number of calls.
    """

    def __init__(self, secret_key, verify_url=API_URL, timeout=DEFAULT_TIMEOUT):
        self._secret_key = secret_key
        self.verify_url = verify_url
        self.timeout = timeout

    @property
    def secret_key(self):
        return self._secret_key

    def __repr__(self):
        return f"<ReCaptcha verify_url={self.verify_url!r}>"

    def build_payload(self, token, client_ip=""):
        """Form fields for one verification request."""
        payload = {
            "secret": self._secret_key,
            "response": token,
        }
        if client_ip:
            payload["remoteip"] = client_ip
        return payload

    def verify(self, token, client_ip=""):
        """Verify a token obtained from the 'g-recaptcha-response' form field.

        Returns True when the token is accepted. A reported failure carrying
        no error codes is also treated as accepted.

        Raises:
            TransportError: the request failed, or the whole exchange took
                longer than ``timeout`` seconds.
            BodyReadError: the response body could not be read.
            ParseError: the body is not the expected JSON object.
            VerificationRejected: the service rejected the token.
        """
        deadline = time.monotonic() + self.timeout
        try:
            resp = requests.post(
                self.verify_url,
                data=self.build_payload(token, client_ip),
                timeout=self.timeout,
                stream=True,
            )
        except requests.RequestException as e:
            logger.debug(f"reCAPTCHA request to {self.verify_url} failed: {e}")
            raise TransportError(f"Verification request failed: {e}") from e

        try:
            body = self._read_body(resp, deadline)
        finally:
            resp.close()

        try:
            data = json.loads(body)
        except ValueError as e:
            logger.debug("reCAPTCHA response is not valid JSON")
            raise ParseError("Response body is not valid JSON", {"status": resp.status_code}) from e

        result = VerificationResult.from_json(data)

        if result.success:
            logger.debug("reCAPTCHA token accepted")
            return True

        if result.error_codes:
            logger.debug(f"reCAPTCHA token rejected: {', '.join(result.error_codes)}")
            raise VerificationRejected(result.error_codes)

        # success=false without error codes counts as accepted
        logger.debug("reCAPTCHA reported failure without error codes, accepting")
        return True

    def _read_body(self, resp, deadline):
        chunks = []
        try:
            for chunk in resp.iter_content(chunk_size=READ_CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise TransportError(f"Verification timed out after {self.timeout}s")
                chunks.append(chunk)
        except (requests.ConnectionError, requests.Timeout) as e:
            # read timeouts surface as ConnectionError while streaming
            raise TransportError(f"Verification request failed: {e}") from e
        except requests.RequestException as e:
            logger.debug(f"Failed to read reCAPTCHA response body: {e}")
            raise BodyReadError(f"Failed to read response body: {e}") from e
        return b"".join(chunks)

    def is_valid(self, token, client_ip=""):
        """Return True if the token verifies, False on any verification error."""
        try:
            return self.verify(token, client_ip)
        except VerificationRejected as e:
            logger.warning(f"reCAPTCHA verification failed: {e.code}")
            return False
        except (TransportError, BodyReadError, ParseError) as e:
            logger.warning(f"reCAPTCHA verification unavailable: {e}")
            return False
