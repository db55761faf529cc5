"""API router for v1 endpoints."""

from fastapi import APIRouter

from release_engine.api import budget, deadlines, milestones, readiness

router = APIRouter()

# Cleared-for-release verdict and action items
router.include_router(readiness.router, tags=["readiness"])

# Budget health and alerts
router.include_router(budget.router, tags=["budget"])

# Smart deadlines and teaser compliance
router.include_router(deadlines.router, tags=["deadlines"])

# Milestone quota, completion gate and templates
router.include_router(milestones.router, tags=["milestones"])
