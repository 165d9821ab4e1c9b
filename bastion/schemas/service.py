"""Service catalog, service instance and service binding schemas."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.app import App
from bastion.schemas.space import SpaceRef


class Service(BaseModel):
    """Schema for a catalog Service."""

    id: UUID = Field(default_factory=uuid4)
    label: str
    provider: Optional[str] = None
    active: bool = True

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ServiceInstance(BaseModel):
    """Schema for a provisioned (managed or user-provided) service instance."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    space: Optional[SpaceRef] = None
    is_user_provided: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ServiceBinding(BaseModel):
    """Schema for a binding between an app and a service instance.

    Authorization follows the app's space, not the service instance's.
    """

    id: UUID = Field(default_factory=uuid4)
    app: Optional[App] = None
    service_instance: Optional[ServiceInstance] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)
