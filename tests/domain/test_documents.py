"""Tests for CPF/CNPJ helpers."""

import pytest

from quantor.domain.services.documents import (
    detect_document_type,
    format_cnpj,
    format_cpf,
    only_digits,
    validate_cnpj,
    validate_cpf,
)


def test_only_digits_strips_punctuation() -> None:
    assert only_digits("529.982.247-25") == "52998224725"


def test_only_digits_ignores_non_ascii_digits() -> None:
    """Arabic-Indic digits are not document digits."""
    assert only_digits("١٢٣") == ""
    assert only_digits("12١3") == "123"


def test_validate_cpf_rejects_non_ascii_digits() -> None:
    # 529.982.247-25 with the check digits written in Arabic-Indic
    assert validate_cpf("529.982.247-٢٥") is False


@pytest.mark.parametrize("value", ["529.982.247-25", "52998224725"])
def test_validate_cpf_accepts_valid_numbers(value: str) -> None:
    assert validate_cpf(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "529.982.247-24",
        "529.982.247-15",
        "111.111.111-11",
        "5299822472",
        "",
    ],
)
def test_validate_cpf_rejects_invalid_numbers(value: str) -> None:
    assert validate_cpf(value) is False


@pytest.mark.parametrize("value", ["11.222.333/0001-81", "11222333000181"])
def test_validate_cnpj_accepts_valid_numbers(value: str) -> None:
    assert validate_cnpj(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "11.222.333/0001-82",
        "11.222.333/0001-71",
        "00.000.000/0000-00",
        "1122233300018",
    ],
)
def test_validate_cnpj_rejects_invalid_numbers(value: str) -> None:
    assert validate_cnpj(value) is False


def test_format_cpf_masks_partial_and_full_input() -> None:
    assert format_cpf("529") == "529"
    assert format_cpf("5299822") == "529.982.2"
    assert format_cpf("52998224725") == "529.982.247-25"
    assert format_cpf("529982247251234") == "529.982.247-25"


def test_format_cnpj_masks_partial_and_full_input() -> None:
    assert format_cnpj("11") == "11"
    assert format_cnpj("112223") == "11.222.3"
    assert format_cnpj("11222333000181") == "11.222.333/0001-81"


def test_detect_document_type() -> None:
    assert detect_document_type("") is None
    assert detect_document_type("529.982.247-25") == "CPF"
    assert detect_document_type("11.222.333/0001-81") == "CNPJ"
