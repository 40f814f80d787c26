from django import forms

from .conf import get_client
from .exceptions import RecaptchaError, VerificationRejected


class ReCaptchaField(forms.CharField):
    """Form field holding the widget's response token, verified on clean.

    Set ``client_ip`` on the bound field's instance (e.g. in the form's
    __init__) to forward the end user's address.
    """

    default_error_messages = {
        "required": "Please complete the reCAPTCHA.",
        "captcha_invalid": "reCAPTCHA verification failed, please try again.",
        "captcha_unavailable": "reCAPTCHA verification is unavailable, please try again later.",
    }

    def __init__(self, *args, client_ip="", **kwargs):
        kwargs.setdefault("widget", forms.HiddenInput)
        super().__init__(*args, **kwargs)
        self.client_ip = client_ip

    def validate(self, value):
        super().validate(value)
        if value in self.empty_values:
            return
        try:
            get_client().verify(value, client_ip=self.client_ip)
        except VerificationRejected as e:
            raise forms.ValidationError(
                self.error_messages["captcha_invalid"],
                code="captcha_invalid",
                params={"error_code": e.code},
            )
        except RecaptchaError:
            raise forms.ValidationError(
                self.error_messages["captcha_unavailable"],
                code="captcha_unavailable",
            )
