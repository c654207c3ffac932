"""
Input normalization for payment notes.

Every entry point (create, update, any future import) goes
through these functions, so the rules live in one place:

- person name: a string, trimmed, non-empty, at most 255 chars
- amount: a finite number > 0, floored to an integer >= 1
- purpose: optional string, trimmed, defaults to ""
- direction: exactly "given" or "received"
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_FLOOR

from paynote.errors import ValidationError
from paynote.models.enums import Direction

MAX_PERSON_NAME_LENGTH = 255
MAX_PURPOSE_LENGTH = 1000

# Largest value a BIGINT column holds
MAX_AMOUNT = 2**63 - 1

# Plain decimal literal: no thousands separators, no currency symbols
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

AMOUNT_ERROR = "Amount must be a valid number greater than 0"


def clean_person_name(value) -> str:
    if value is None:
        raise ValidationError("Person name is required")
    if not isinstance(value, str):
        raise ValidationError("Person name must be text")
    name = value.strip()
    if not name:
        raise ValidationError("Person name is required")
    if len(name) > MAX_PERSON_NAME_LENGTH:
        raise ValidationError(
            f"Person name must be at most {MAX_PERSON_NAME_LENGTH} characters"
        )
    return name


def parse_amount(value) -> int:
    """
    Convert a client-supplied amount to the stored integer.

    Accepts ints, finite floats, Decimals and plain numeric
    strings ("5000.7", " 42 ", "1e3"). The value is floored,
    never rounded: "5000.7" becomes 5000. Anything that floors
    below 1 is rejected.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Amount is required")

    # bool is a subclass of int
    if isinstance(value, bool):
        raise ValidationError(AMOUNT_ERROR)

    if isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, Decimal):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            raise ValidationError(AMOUNT_ERROR)
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise ValidationError(AMOUNT_ERROR)
    else:
        raise ValidationError(AMOUNT_ERROR)

    if not number.is_finite() or number <= 0:
        raise ValidationError(AMOUNT_ERROR)
    # floor(number) > MAX_AMOUNT exactly when number >= MAX_AMOUNT + 1;
    # checked before flooring so "1e999999999" never becomes an int
    if number >= MAX_AMOUNT + 1:
        raise ValidationError("Amount is too large")

    floored = int(number.to_integral_value(rounding=ROUND_FLOOR))
    if floored < 1:
        raise ValidationError("Amount must be at least 1")
    return floored


def clean_purpose(value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("Purpose must be text")
    purpose = value.strip()
    if len(purpose) > MAX_PURPOSE_LENGTH:
        raise ValidationError(
            f"Purpose must be at most {MAX_PURPOSE_LENGTH} characters"
        )
    return purpose


def parse_direction(value) -> Direction:
    if value is None or value == "":
        raise ValidationError("Type is required")
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        for direction in Direction:
            if value == direction.value:
                return direction
    raise ValidationError("Type must be either 'given' or 'received'")
