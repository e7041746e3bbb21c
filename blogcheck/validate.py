import logging
import re
from collections.abc import Mapping
from typing import Any

from blogcheck.configs import DEFAULT_EMAIL_PATTERN
from blogcheck.configs import ValidationConfig

DEFAULT_CONFIG = ValidationConfig()
EMAIL_STRUCTURE = re.compile(DEFAULT_EMAIL_PATTERN)

# string trim set: ASCII whitespace, Unicode space separators, line/paragraph
# separators and the byte order mark
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

NOT_A_RECORD = (str, bytes, bytearray, int, float, complex, list, tuple, set, frozenset)

def _read_field(form_data: Any, name: str) -> Any:
    if isinstance(form_data, Mapping):
        return form_data.get(name)
    return getattr(form_data, name, None)

def _within(length: int, low: int, high: int | None) -> bool:
    return length >= low and (high is None or length <= high)

def validate_blog_post_form_data(form_data: Any, config: ValidationConfig | None = None) -> bool:
    """Check a submitted blog post's title and text.

    Args:
    ---
    form_data (Any): A mapping, or any object with `blogTitle` and `blogText` attributes.
    config (ValidationConfig | None): Length bounds, defaults to 2-200 / 2-10000.

    Returns:
    ---
    bool: True if both fields are strings whose trimmed lengths are in bounds.
    """
    config = config or DEFAULT_CONFIG

    if form_data is None or isinstance(form_data, NOT_A_RECORD):
        logging.debug(f"Form data of type {type(form_data).__name__} is not a record.")
        return False

    blog_title = _read_field(form_data, "blogTitle")
    blog_text = _read_field(form_data, "blogText")

    if not isinstance(blog_title, str) or not isinstance(blog_text, str):
        logging.debug(
            f"Blog title ({type(blog_title).__name__}) and text ({type(blog_text).__name__}) must both be strings."
        )
        return False

    title_length = len(blog_title.strip(WHITESPACE))
    text_length = len(blog_text.strip(WHITESPACE))

    if not _within(title_length, config.title_min_length, config.title_max_length):
        logging.debug(
            f"Blog title length {title_length} outside [{config.title_min_length}, {config.title_max_length}]."
        )
        return False

    if not _within(text_length, config.text_min_length, config.text_max_length):
        logging.debug(
            f"Blog text length {text_length} outside [{config.text_min_length}, {config.text_max_length}]."
        )
        return False

    return True

def validate_email_address_structure(email_address: Any, config: ValidationConfig | None = None) -> bool:
    """Check that the whole string, trailing newline included, has the shape of an email address."""
    if not isinstance(email_address, str):
        logging.debug(f"Email address of type {type(email_address).__name__} is not a string.")
        return False

    pattern = EMAIL_STRUCTURE if config is None else re.compile(config.email_pattern)
    if pattern.fullmatch(email_address) is None:
        logging.debug("Email address does not match the expected structure.")
        return False

    return True
