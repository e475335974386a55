# storefront/domain/errors.py
"""
Closed set of errors raised by the services.

The API layer maps each class to one HTTP status code; anything that is not
a ShopError is a bug and surfaces as a plain 500.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ShopError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    """Malformed or out-of-range input, fixable by the caller."""

    status_code = 400

    def __init__(self, message: str, details: List[FieldError] | None = None):
        super().__init__(message)
        self.details = list(details or [])


class NotFoundError(ShopError):
    """A referenced product, cart item or wishlist item does not exist."""

    status_code = 404


class StateError(ShopError):
    """Operation not allowed in the current state, e.g. checkout of an empty cart."""

    status_code = 400


class StoreError(ShopError):
    """The underlying database failed."""

    status_code = 500


__all__ = [
    "FieldError",
    "ShopError",
    "ValidationError",
    "NotFoundError",
    "StateError",
    "StoreError",
]
