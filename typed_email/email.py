# typed_email/email.py
import logging
from functools import total_ordering
from typing import Any, Iterator, Union

from .exceptions import EmailNotValidError
from .utils.email_validator import email_rejection_reason

module_logger = logging.getLogger(__name__)


@total_ordering
class Email:
    """
    A string-like value that is always a structurally valid email address.

    The only way to obtain an instance is the checked constructor (``Email(raw)``
    or ``Email.from_string(raw)``); invalid text raises ``EmailNotValidError``
    and nothing is constructed. The text is stored exactly as given (no
    lowercasing or trimming) and cannot be changed afterwards.

    An Email compares, orders and hashes like its text, so ``Email("a@b.co") == "a@b.co"``
    and both can be used as the same dict key.
    """

    __slots__ = ("_value",)

    _value: str

    def __init__(self, raw_email: Union[str, "Email"]):
        if hasattr(self, "_value"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        if isinstance(raw_email, Email):
            value = raw_email._value
        elif isinstance(raw_email, str):
            value = str(raw_email)
            reason = email_rejection_reason(value)
            if reason is not None:
                module_logger.debug(f"Refusing to construct Email from {value!r}: {reason}")
                raise EmailNotValidError(value, reason)
        else:
            raise TypeError(f"Email expects a str or Email, got {type(raw_email).__name__}")
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_string(cls, raw_email: Union[str, "Email"]) -> "Email":
        """
        Checked constructor.

        Raises:
            EmailNotValidError: If `raw_email` is not a structurally valid address.
            TypeError: If `raw_email` is not a string.
        """
        return cls(raw_email)

    def as_str(self) -> str:
        return self._value

    @property
    def local_part(self) -> str:
        """The text before the '@'."""
        return self._value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        """The text after the '@'."""
        return self._value.split("@", 1)[1]

    # --- immutability ---
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Email":
        return self

    def __deepcopy__(self, memo: dict) -> "Email":
        return self

    def __reduce__(self):
        # Unpickling goes back through the checked constructor.
        return (self.__class__, (self._value,))

    # --- string interop ---
    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._value)

    def __getitem__(self, key: Union[int, slice]) -> str:
        return self._value[key]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Email):
            item = item._value
        return item in self._value

    def __add__(self, other: object) -> str:
        if isinstance(other, (str, Email)):
            return self._value + str(other)
        return NotImplemented

    def __radd__(self, other: object) -> str:
        if isinstance(other, str):
            return other + self._value
        return NotImplemented

    # --- comparison ---
    @staticmethod
    def _text_of(other: object) -> Union[str, None]:
        if isinstance(other, Email):
            return other._value
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return self._value == text

    def __lt__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return self._value < text

    def __hash__(self) -> int:
        return hash(self._value)

    # --- pydantic integration ---
    @classmethod
    def _validate(cls, value: Any) -> "Email":
        from pydantic_core import PydanticCustomError, PydanticKnownError

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticKnownError("string_type")
        try:
            return cls(value)
        except EmailNotValidError as e:
            raise PydanticCustomError(
                "email_invalid",
                "value is not a valid email address: {reason}",
                {"reason": e.reason, "raw_email": e.raw_email},
            ) from e

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        checked = core_schema.no_info_plain_validator_function(cls._validate)
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema([core_schema.str_schema(), checked]),
            python_schema=checked,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.as_str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Any:
        json_schema = handler(schema)
        json_schema.update(format="email")
        return json_schema
