"""
Service layer - business logic and orchestration.

Services contain the application's business logic and depend on the store
protocols, never on a concrete repository or a database session.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from placementlog.services.auth_service import AdminAuthService, UserAuthService
from placementlog.services.post_service import PostService
from placementlog.services.placement_service import (
    PlacementService,
    branch_from_registration_number,
    count_branches,
)

__all__ = [
    "UserAuthService",
    "AdminAuthService",
    "PostService",
    "PlacementService",
    "branch_from_registration_number",
    "count_branches",
]
