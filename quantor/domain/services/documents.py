"""Brazilian taxpayer document helpers (CPF and CNPJ)."""

import re

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"[^0-9]")
_CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: str) -> str:
    """Strip every non-digit character from ``value``."""
    return _NON_DIGITS.sub("", value)


def _is_repeated_sequence(numbers: str) -> bool:
    return len(set(numbers)) == 1


def _cpf_check_digit(numbers: str) -> int:
    first_weight = len(numbers) + 1
    total = sum(
        int(digit) * (first_weight - position)
        for position, digit in enumerate(numbers)
    )
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def _cnpj_check_digit(numbers: str, weights: tuple[int, ...]) -> int:
    total = sum(int(digit) * weight for digit, weight in zip(numbers, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: str) -> bool:
    """Return True when ``value`` is a CPF with valid check digits.

    Punctuation is ignored. Sequences of a single repeated digit
    (``111.111.111-11``) pass the checksum but are rejected.
    """
    numbers = only_digits(value)
    if len(numbers) != CPF_LENGTH or _is_repeated_sequence(numbers):
        return False
    if _cpf_check_digit(numbers[:9]) != int(numbers[9]):
        return False
    return _cpf_check_digit(numbers[:10]) == int(numbers[10])


def validate_cnpj(value: str) -> bool:
    """Return True when ``value`` is a CNPJ with valid check digits."""
    numbers = only_digits(value)
    if len(numbers) != CNPJ_LENGTH or _is_repeated_sequence(numbers):
        return False
    if _cnpj_check_digit(numbers[:12], _CNPJ_FIRST_WEIGHTS) != int(numbers[12]):
        return False
    return _cnpj_check_digit(numbers[:13], _CNPJ_SECOND_WEIGHTS) == int(
        numbers[13]
    )


def format_cpf(value: str) -> str:
    """Mask a (possibly partial) CPF as ``000.000.000-00``."""
    numbers = only_digits(value)[:CPF_LENGTH]
    formatted = numbers[:3]
    if len(numbers) > 3:
        formatted += f".{numbers[3:6]}"
    if len(numbers) > 6:
        formatted += f".{numbers[6:9]}"
    if len(numbers) > 9:
        formatted += f"-{numbers[9:]}"
    return formatted


def format_cnpj(value: str) -> str:
    """Mask a (possibly partial) CNPJ as ``00.000.000/0000-00``."""
    numbers = only_digits(value)[:CNPJ_LENGTH]
    formatted = numbers[:2]
    if len(numbers) > 2:
        formatted += f".{numbers[2:5]}"
    if len(numbers) > 5:
        formatted += f".{numbers[5:8]}"
    if len(numbers) > 8:
        formatted += f"/{numbers[8:12]}"
    if len(numbers) > 12:
        formatted += f"-{numbers[12:]}"
    return formatted


def detect_document_type(value: str) -> str | None:
    """Guess the document type from its digit count.

    Returns:
        str | None: ``"CPF"`` for up to 11 digits, ``"CNPJ"`` above that,
        None when ``value`` holds no digits.
    """
    numbers = only_digits(value)
    if not numbers:
        return None
    return "CPF" if len(numbers) <= CPF_LENGTH else "CNPJ"


__all__ = [
    "CPF_LENGTH",
    "CNPJ_LENGTH",
    "only_digits",
    "validate_cpf",
    "validate_cnpj",
    "format_cpf",
    "format_cnpj",
    "detect_document_type",
]
