from __future__ import annotations


class StatBarError(ValueError):
    """Base error for statistical bar rendering."""


class DatasetError(StatBarError):
    """Raised when dataset input cannot be coerced into mean/std-dev tables."""


class InvalidDatasetKind(StatBarError, TypeError):
    """Raised when a dataset does not expose mean and standard deviation accessors."""
