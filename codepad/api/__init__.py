"""HTTP routes (unversioned paths used by the editor frontend)."""

from fastapi import APIRouter

from codepad.api import auth, health, projects

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(projects.router, tags=["projects"])
router.include_router(health.router, tags=["health"])
