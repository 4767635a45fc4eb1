"""Quantor chart-of-accounts toolkit."""
