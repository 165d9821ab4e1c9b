"""Access domain schemas (Pydantic models)."""

from uuid import UUID

from pydantic import BaseModel, Field

from bastion.domains.access.types import Scope


class RoleMembership(BaseModel):
    """A single role assignment as stored by the membership store.

    Examples:
    - Org manager: RoleMembership(user_id=u, scope="organization", role="manager",
      resource_id=org_id)
    - Space developer: RoleMembership(user_id=u, scope="space", role="developer",
      resource_id=space_id)
    """

    user_id: UUID
    scope: Scope
    role: str = Field(description="Role name within the scope, e.g. 'developer'")
    resource_id: UUID = Field(description="Organization or space the role is held in")

    model_config = {"from_attributes": True, "frozen": True}
