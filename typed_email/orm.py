# typed_email/orm.py
"""SQLAlchemy column type storing an Email as plain text."""

import logging
from typing import Any, Optional

from sqlalchemy.types import Text, TypeDecorator

from .email import Email

module_logger = logging.getLogger(__name__)


class EmailType(TypeDecorator):
    """Text column holding an email address.

    Values are written as their plain text and read back through the checked
    Email constructor, so a row holding malformed text raises
    ``EmailNotValidError`` on load instead of producing an invalid Email.
    Plain strings are validated before they are bound.
    """

    impl = Text
    cache_ok = True

    @property
    def python_type(self) -> type:
        return Email

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        return Email.from_string(value).as_str()

    def process_result_value(self, value: Any, dialect: Any) -> Optional[Email]:
        if value is None:
            return None
        try:
            return Email.from_string(value)
        except ValueError:
            module_logger.error(f"Stored value {value!r} is not a valid email address")
            raise
