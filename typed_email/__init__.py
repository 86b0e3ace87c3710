import logging
from .email import Email
from .exceptions import EmailError, EmailNotValidError
from .utils.email_validator import is_valid_email, email_rejection_reason

# Setup of a default null handler for the library's root logger
# This prevents messages from being output to stderr if the consuming application doesn't configure logging
# See: https://docs.python.org/3/howto/logging.html#configuring-logging-for-a-library
library_root_logger = logging.getLogger(__name__)
if not library_root_logger.hasHandlers():
    library_root_logger.addHandler(logging.NullHandler())

__all__ = [
    "Email",
    "EmailError",
    "EmailNotValidError",
    "is_valid_email",
    "email_rejection_reason",
]
