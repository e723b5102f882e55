from __future__ import annotations


class PeriodicaError(Exception):
    """Base exception for periodica errors."""


class CatalogIntegrityError(PeriodicaError):
    """Raised when the element dataset breaks one of its invariants."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        message = "Element catalog failed validation:\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


class MissingTranslationError(CatalogIntegrityError, KeyError):
    """Raised when a localized element name is requested for an unknown atomic number."""

    def __init__(self, atomic_number: object) -> None:
        self.atomic_number = atomic_number
        super().__init__([f"no localized name for atomic number {atomic_number!r}"])

    def __str__(self) -> str:
        return Exception.__str__(self)
