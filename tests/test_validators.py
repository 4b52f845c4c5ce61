"""Tests for the URL validator on Demo.url."""

import pytest
from tortoise.exceptions import ValidationError

from common.validators import URLValidator


@pytest.fixture
def validator():
    return URLValidator()


@pytest.mark.parametrize("value", [
    "http://a.b",
    "http://www.foo.bar",
    "https://example.com/path?q=1#frag",
    "http://wwwfoobar",
    "ftp://user:pw@files.example.com:2121/x",
    "http://127.0.0.1:8001/demos",
    "http://[::1]/",
])
def test_accepts(validator, value):
    validator(value)


@pytest.mark.parametrize("value", [
    "",
    "foo",
    "not a url",
    "www.foo.bar",
    "http://",
    "http://exa mple.com",
    " http://a.b",
    "http://a.b\n",
    "http://a.b:99999",
    None,
    42,
])
def test_rejects(validator, value):
    with pytest.raises(ValidationError, match="Validation isUrl failed"):
        validator(value)
