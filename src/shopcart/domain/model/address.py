"""Shipping address value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:

    street: str
    city: str
    zip_code: str
    country: str

    @property
    def formatted(self) -> str:
        return f"{self.street}\n{self.city}, {self.zip_code}\n{self.country}"
