"""Core protocols shared across domains."""

from bastion.core.protocols.registry import BaseRegistryEntry, RegistryProtocol

__all__ = ["BaseRegistryEntry", "RegistryProtocol"]
