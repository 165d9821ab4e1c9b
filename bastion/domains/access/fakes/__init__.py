"""Fakes for the access domain."""

from bastion.domains.access.fakes.repository import FakeRoleMembershipRepository

__all__ = ["FakeRoleMembershipRepository"]
