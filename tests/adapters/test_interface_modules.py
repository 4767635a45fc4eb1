"""Ensure the adapters package exposes the expected metadata."""

from importlib import import_module


def test_adapters_package_exports_are_empty() -> None:
    module = import_module("quantor.adapters")
    assert module.__all__ == []
