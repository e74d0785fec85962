"""Tests for form and path validation helpers."""
import pytest
from fastapi import HTTPException

from api.forms import LinkForm, parse_id, parse_link_form, require_category_name


class TestParseId:
    """Tests for parse_id."""

    @pytest.mark.parametrize(("value", "expected"), [("1", 1), (" 42 ", 42), ("-3", -3), ("+7", 7)])
    def test__parse_id__valid(self, value: str, expected: int) -> None:
        """Base-10 integers with optional sign and surrounding spaces are accepted."""
        assert parse_id(value, "bad") == expected

    @pytest.mark.parametrize(
        "value", ["", "abc", "1.0", "1_000", "0x1f", "١٢", "9223372036854775808"],
    )
    def test__parse_id__invalid(self, value: str) -> None:
        """Anything else is a 400 carrying the given detail."""
        with pytest.raises(HTTPException) as exc_info:
            parse_id(value, "invalid link id")
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "invalid link id"


def test__require_category_name__strips() -> None:
    """Names are stripped; blank names are rejected."""
    assert require_category_name("  Dev ") == "Dev"
    with pytest.raises(HTTPException) as exc_info:
        require_category_name(" \t ")
    assert exc_info.value.detail == "category name is required"


def test__parse_link_form__strips_and_parses() -> None:
    """All three fields are stripped and category_id is parsed."""
    form = parse_link_form(" Repo ", " https://x ", " 3 ")
    assert (form.name, form.url, form.category_id) == ("Repo", "https://x", 3)


def test__parse_link_form__missing_field() -> None:
    """Any blank field is reported with the shared message."""
    with pytest.raises(HTTPException) as exc_info:
        parse_link_form("Repo", "", "3")
    assert exc_info.value.detail == "name, url, and category are required"


def test__link_form__strips_name_and_url() -> None:
    """LinkForm strips name and url when built directly."""
    form = LinkForm(name="  Repo\t", url=" https://x/a b ", category_id=1)
    assert form.model_dump() == {"name": "Repo", "url": "https://x/a b", "category_id": 1}
