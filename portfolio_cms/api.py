"""API router: every resource endpoint under the /api prefix."""

from fastapi import APIRouter

from .certifications.routes import router as certifications_router
from .contact.routes import router as contact_router
from .dashboard.routes import router as dashboard_router
from .education.routes import router as education_router
from .profile.routes import router as profile_router
from .projects.routes import router as projects_router
from .technologies.routes import router as technologies_router
from .testimonials.routes import router as testimonials_router
from .work_experience.routes import router as work_experience_router

api_router = APIRouter(prefix="/api")

api_router.include_router(profile_router)
api_router.include_router(work_experience_router)
api_router.include_router(education_router)
api_router.include_router(certifications_router)
api_router.include_router(technologies_router)
api_router.include_router(testimonials_router)
api_router.include_router(projects_router)
api_router.include_router(contact_router)
api_router.include_router(dashboard_router)
