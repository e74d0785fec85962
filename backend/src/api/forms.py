"""Validation of form fields and path parameters for the action endpoints."""
import re

from fastapi import HTTPException
from pydantic import BaseModel, field_validator


# SQLite INTEGER is a signed 64-bit value
_MAX_ID = 2**63 - 1
_MIN_ID = -(2**63)
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class LinkForm(BaseModel):
    """Validated fields for creating or replacing a link."""

    name: str
    url: str
    category_id: int

    @field_validator("name", "url", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace; the url is otherwise stored verbatim."""
        return v.strip()


def parse_id(value: str, detail: str) -> int:
    """
    Parse a base-10 integer id.

    Raises:
        HTTPException: 400 with `detail` if the value is not an integer in range.
    """
    text = value.strip()
    if not _ID_PATTERN.fullmatch(text):
        raise HTTPException(status_code=400, detail=detail)
    number = int(text)
    if not _MIN_ID <= number <= _MAX_ID:
        raise HTTPException(status_code=400, detail=detail)
    return number


def require_category_name(name: str) -> str:
    """Return the stripped name, or raise 400 if it is blank."""
    stripped = name.strip()
    if not stripped:
        raise HTTPException(status_code=400, detail="category name is required")
    return stripped


def parse_link_form(name: str, url: str, category_id: str) -> LinkForm:
    """Strip and validate the link fields shared by create and update."""
    if not name.strip() or not url.strip() or not category_id.strip():
        raise HTTPException(
            status_code=400,
            detail="name, url, and category are required",
        )
    return LinkForm(
        name=name,
        url=url,
        category_id=parse_id(category_id, "invalid category id"),
    )
