import pytest

from resume_import.core.validation import is_valid_email, is_valid_phone, is_valid_url, sanitize_html


@pytest.mark.parametrize("email, ok", [
    ("jane@x.com", True),
    ("jane.doe+cv@mail.example.org", True),
    ("jane@x", False),
    ("jane doe@x.com", False),
    ("@x.com", False),
    ("", False),
])
def test_is_valid_email(email, ok):
    assert is_valid_email(email) is ok


@pytest.mark.parametrize("phone, ok", [
    ("+1 (555) 123-4567", True),
    ("5551234567", True),
    ("555-1234", False),
    ("555.123.4567", False),
    ("", False),
])
def test_is_valid_phone(phone, ok):
    assert is_valid_phone(phone) is ok


@pytest.mark.parametrize("url, ok", [
    ("https://github.com/jane", True),
    ("http://localhost:3000", True),
    ("mailto:jane@x.com", True),
    ("github.com/jane", False),
    ("not a url", False),
    ("", False),
])
def test_is_valid_url(url, ok):
    assert is_valid_url(url) is ok


def test_sanitize_html_escapes_markup_only():
    assert sanitize_html('<script>alert("x")</script> & co') == '&lt;script&gt;alert("x")&lt;/script&gt; &amp; co'
