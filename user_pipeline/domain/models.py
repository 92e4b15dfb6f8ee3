"""
Domain models for the user pipeline.

Mirrors the user payload served by the record source (JSONPlaceholder
``/users``). Only the fields the pipeline renders, filters or persists are
modelled; anything else the source sends is ignored. Models are frozen so a
user can be shared across worker threads without copying.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Postal address of a user."""

    street: str = ""
    suite: str = ""
    city: str = ""
    zipcode: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Company(BaseModel):
    """Employer of a user; ``catch_phrase`` is the tagline the filter inspects."""

    name: str = ""
    catch_phrase: str = Field("", alias="catchPhrase")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class User(BaseModel):
    """
    Representation of a single user record from the source.
    """

    id: int = Field(..., description="Source-assigned unique identifier.")
    name: str = Field("", description="Display name.")
    email: str = Field("", description="Contact email.")
    address: Address = Field(default_factory=Address)
    company: Company = Field(default_factory=Company)

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Plain mapping in the persisted key layout."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "address": {
                "street": self.address.street,
                "suite": self.address.suite,
                "city": self.address.city,
                "zipcode": self.address.zipcode,
            },
            "company": {
                "name": self.company.name,
                "catchphrase": self.company.catch_phrase,
            },
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        """Inverse of :meth:`to_record`."""
        company = dict(record.get("company") or {})
        return cls(
            id=record["id"],
            name=record.get("name", ""),
            email=record.get("email", ""),
            address=Address(**(record.get("address") or {})),
            company=Company(
                name=company.get("name", ""),
                catch_phrase=company.get("catchphrase", ""),
            ),
        )


# Users that passed the filter. Finalized by a collector, never mutated after.
MatchSet = Tuple[User, ...]


__all__ = ["Address", "Company", "User", "MatchSet"]
