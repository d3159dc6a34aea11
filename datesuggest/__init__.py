"""Fuzzy natural-language date suggestions for date pickers."""
