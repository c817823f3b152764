"""Postal code (CEP) format validation."""

import re

CEP_LENGTH = 8

_DIGITS = re.compile(r"[0-9]+")


def is_valid_cep(cep: str) -> bool:
    """
    Check that a postal code is exactly eight ASCII digits.

    No normalization is applied: surrounding whitespace or the usual
    ``01001-000`` hyphenated form are rejected.

    Args:
        cep: Untrusted postal code

    Returns:
        True if the code is well formed, False otherwise
    """
    if not isinstance(cep, str) or len(cep) != CEP_LENGTH:
        return False
    return _DIGITS.fullmatch(cep) is not None
