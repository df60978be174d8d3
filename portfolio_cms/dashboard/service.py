"""Dashboard service: per-collection document counts.

Not cached: every call issues one count query per collection.
"""

from sqlalchemy.orm import Session

from ..certifications.models import Certification
from ..common.identity import count
from ..education.models import Education
from ..projects.models import Project
from ..technologies.models import Technology
from ..testimonials.models import Testimonial
from ..work_experience.models import WorkExperience
from .schemas import CountResponse


def get_counts(db: Session) -> CountResponse:
    return CountResponse(
        certifications=count(db, Certification),
        education=count(db, Education),
        projects=count(db, Project),
        technologies=count(db, Technology),
        testimonials=count(db, Testimonial),
        work_experiences=count(db, WorkExperience),
    )
