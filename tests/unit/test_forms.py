"""Unit tests for recaptcha.forms module."""
import requests
from django import forms

from recaptcha.forms import ReCaptchaField


class ContactForm(forms.Form):
    message = forms.CharField()
    captcha = ReCaptchaField()

    def __init__(self, *args, client_ip="", **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["captcha"].client_ip = client_ip


class TestReCaptchaField:
    """Tests for ReCaptchaField."""

    def test_valid_token(self, siteverify):
        mock_post = siteverify({"success": True})
        form = ContactForm({"message": "hi", "captcha": "valid-token"})

        assert form.is_valid()
        assert form.cleaned_data["captcha"] == "valid-token"
        assert mock_post.call_args.kwargs["data"] == {"secret": "test-secret", "response": "valid-token"}

    def test_client_ip_forwarded(self, siteverify):
        mock_post = siteverify({"success": True})
        form = ContactForm({"message": "hi", "captcha": "valid-token"}, client_ip="203.0.113.5")

        assert form.is_valid()
        assert mock_post.call_args.kwargs["data"]["remoteip"] == "203.0.113.5"

    def test_missing_token_skips_verification(self, mock_post):
        form = ContactForm({"message": "hi"})

        assert not form.is_valid()
        assert form.errors.as_data()["captcha"][0].code == "required"
        mock_post.assert_not_called()

    def test_rejected_token(self, siteverify):
        siteverify({"success": False, "error-codes": ["invalid-input-response"]})
        form = ContactForm({"message": "hi", "captcha": "bad-token"})

        assert not form.is_valid()
        assert form.errors.as_data()["captcha"][0].code == "captcha_invalid"

    def test_service_unavailable(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("down")
        form = ContactForm({"message": "hi", "captcha": "token"})

        assert not form.is_valid()
        assert form.errors.as_data()["captcha"][0].code == "captcha_unavailable"

    def test_optional_field_empty_skips_verification(self, mock_post):
        """Test an empty optional captcha is valid without a network call."""

        class OptionalCaptchaForm(forms.Form):
            captcha = ReCaptchaField(required=False)

        form = OptionalCaptchaForm({"captcha": ""})

        assert form.is_valid()
        mock_post.assert_not_called()

    def test_hidden_widget(self):
        assert isinstance(ReCaptchaField().widget, forms.HiddenInput)
