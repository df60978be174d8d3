"""Dashboard schemas."""

from ..common.validation import WireModel


class CountResponse(WireModel):
    certifications: int = 0
    education: int = 0
    projects: int = 0
    technologies: int = 0
    testimonials: int = 0
    work_experiences: int = 0
