"""Tests for the aggregate count endpoint and dashboard service."""

from portfolio_cms.dashboard.service import get_counts
from portfolio_cms.education.models import Education

AWS = {"name": "AWS SA", "provider": "Amazon", "date": "2024-01-01", "certificateUrl": "https://x/y"}


class TestCountEndpoint:
    def test_empty(self, client):
        resp = client.get("/api/count")
        assert resp.status_code == 200
        assert resp.json() == {
            "certifications": 0,
            "education": 0,
            "projects": 0,
            "technologies": 0,
            "testimonials": 0,
            "workExperiences": 0,
        }

    def test_counts_each_collection(self, client):
        client.post("/api/certifications", json=AWS)
        client.post("/api/certifications", json=AWS)
        client.post("/api/technologies", data={"name": "Go", "category": "Backend"})
        client.post("/api/work-experience", data={"title": "Dev", "company": "Acme"})
        data = client.get("/api/count").json()
        assert data["certifications"] == 2
        assert data["technologies"] == 1
        assert data["workExperiences"] == 1
        assert data["projects"] == 0


class TestGetCounts:
    def test_service_counts(self, db_session):
        db_session.add(Education(id=1, degree="BSc", institution="Uni"))
        db_session.commit()
        counts = get_counts(db_session)
        assert counts.education == 1
        assert counts.work_experiences == 0
