"""Registry protocols.

A registry maps a short name to a frozen entry describing one registered
implementation. Bastion's access policy registry is keyed by resource kind.
"""

from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict


class BaseRegistryEntry(BaseModel):
    """Registry entry: identity and provenance of a registered implementation."""

    model_config = ConfigDict(frozen=True)

    short_name: str
    name: str
    description: str | None
    class_name: str


EntryT = TypeVar("EntryT", bound=BaseRegistryEntry, covariant=True)


class RegistryProtocol(Protocol[EntryT]):
    """In-memory registry, built once at startup and read-only afterwards."""

    def get(self, short_name: str) -> EntryT:
        """Get an entry by short name. Raises KeyError if not found."""
        ...

    def list_all(self) -> list[EntryT]:
        """List all registered entries."""
        ...
