"""Tests for work experience routes."""

from conftest import PNG

EXPERIENCE = {
    "title": "Backend Engineer",
    "company": "Acme",
    "location": "Remote",
    "period": "2021 - 2024",
    "description": "APIs",
    "responsibilities": ["  Design services ", "", "Review code"],
    "technologies": ["Python", "PostgreSQL"],
}


class TestWorkExperience:
    def test_create_normalizes_lists(self, client):
        resp = client.post("/api/work-experience", data=EXPERIENCE)
        assert resp.status_code == 201
        data = resp.json()
        assert data["responsibilities"] == ["Design services", "Review code"]
        assert data["technologies"] == ["Python", "PostgreSQL"]
        assert data["companyLogo"] == ""

    def test_logo_uploaded_to_company_folder(self, client, media_host):
        resp = client.post("/api/work-experience", data=EXPERIENCE, files={"companyLogo": PNG})
        assert resp.status_code == 201
        assert media_host.uploads[0]["folder"] == "company/logos"
        assert resp.json()["companyLogo"] == media_host.uploads[0]["url"]

    def test_missing_company(self, client):
        resp = client.post("/api/work-experience", data={**EXPERIENCE, "company": ""})
        assert resp.status_code == 400
        assert resp.json()["error"] == "company is required"

    def test_update_keeps_logo(self, client):
        logo = client.post("/api/work-experience", data=EXPERIENCE, files={"companyLogo": PNG}).json()["companyLogo"]
        resp = client.put(
            "/api/work-experience/1", data={**EXPERIENCE, "technologies": ["Go"], "responsibilities": []}
        )
        assert resp.status_code == 200
        assert resp.json()["companyLogo"] == logo
        assert resp.json()["technologies"] == ["Go"]
        assert resp.json()["responsibilities"] == []

    def test_update_without_required_fields(self, client):
        client.post("/api/work-experience", data=EXPERIENCE)
        assert client.put("/api/work-experience/1", data={"location": "Rome"}).status_code == 400
        assert client.get("/api/work-experience/1").json()["location"] == "Remote"

    def test_delete(self, client, media_host):
        client.post("/api/work-experience", data=EXPERIENCE, files={"companyLogo": PNG})
        resp = client.delete("/api/work-experience/1")
        assert resp.json() == {"message": "Work experience deleted successfully"}
        assert media_host.destroyed == [("company/logos/file1", "image")]

    def test_not_found(self, client):
        resp = client.get("/api/work-experience/8")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Work experience not found"
        assert client.delete("/api/work-experience/8").status_code == 404
