"""Dependency Injection Container Module.

Usage:
------
    # Build once at startup
    from bastion.core.config import settings
    from bastion.core.container import create_container

    container = create_container(settings, membership_repo, route_counter, memory_repo)

    # In tests, construct directly with fakes
    from bastion.core.container import Container

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from bastion.core.container.container import Container
from bastion.core.container.factory import create_container

__all__ = ["Container", "create_container"]
