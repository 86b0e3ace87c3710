class EmailError(ValueError):
    """Base class for errors raised by typed_email."""


class EmailNotValidError(EmailError):
    """Exception raised when a string is not a structurally valid email address.

    The rejected input is kept verbatim in ``raw_email`` so callers can report it.
    """

    def __init__(self, raw_email: str, reason: str = "does not match the required email structure"):
        self.raw_email = raw_email
        self.reason = reason
        super().__init__(f"Invalid email {raw_email!r}: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.raw_email, self.reason))
