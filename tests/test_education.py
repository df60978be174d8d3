"""Tests for education routes (JSON bodies)."""

DEGREE = {
    "degree": "BSc Computer Science",
    "institution": "University of Turin",
    "location": "Turin",
    "period": "2015 - 2018",
    "courses": "Algorithms, Databases\nNetworks",
}


class TestEducation:
    def test_create_splits_courses(self, client):
        resp = client.post("/api/education", json=DEGREE)
        assert resp.status_code == 201
        assert resp.json()["courses"] == ["Algorithms", "Databases", "Networks"]
        assert resp.json()["options"] == ""

    def test_courses_as_array(self, client):
        resp = client.post("/api/education", json={**DEGREE, "courses": [" Compilers ", ""]})
        assert resp.json()["courses"] == ["Compilers"]

    def test_null_optional_fields(self, client):
        resp = client.post("/api/education", json={**DEGREE, "description": None, "courses": None})
        assert resp.status_code == 201
        assert resp.json()["description"] == ""
        assert resp.json()["courses"] == []

    def test_missing_institution(self, client):
        resp = client.post("/api/education", json={"degree": "MSc"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "institution is required"

    def test_update(self, client):
        client.post("/api/education", json=DEGREE)
        resp = client.put("/api/education/1", json={**DEGREE, "options": "Honours"})
        assert resp.status_code == 200
        assert resp.json()["options"] == "Honours"

    def test_update_without_required_fields(self, client):
        client.post("/api/education", json=DEGREE)
        assert client.put("/api/education/1", json={"location": "Milan"}).status_code == 400
        assert client.get("/api/education/1").json()["location"] == "Turin"

    def test_delete(self, client):
        client.post("/api/education", json=DEGREE)
        assert client.delete("/api/education/1").json() == {"message": "Education deleted successfully"}
        assert client.delete("/api/education/1").status_code == 404
