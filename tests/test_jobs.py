"""
Tests for jobs and the job status lifecycle
"""
from datetime import date

import pytest

from grounded.models.job import JobStatus
from grounded.services.job_service import check_job_transition, initial_job_status
from grounded.utils.exceptions import ValidationError


@pytest.fixture
def job_payload():
    def _job_payload(client_id, **overrides):
        payload = {
            "title": "Front bed refresh",
            "serviceType": "plant_installation",
            "clientId": client_id,
            "jobAddress": "40 Birch Road",
            "jobCity": "Cary",
            "jobState": "NC",
            "jobZipCode": "27511",
        }
        payload.update(overrides)
        return payload

    return _job_payload


@pytest.mark.unit
class TestJobLifecycle:
    """Tests for initial status and allowed transitions"""

    def test_scheduled_when_dated(self):
        assert initial_job_status(date(2026, 6, 1)) == JobStatus.SCHEDULED

    def test_pending_without_date(self):
        assert initial_job_status(None) == JobStatus.PENDING

    def test_forward_transitions(self):
        check_job_transition("pending", JobStatus.SCHEDULED)
        check_job_transition("scheduled", JobStatus.IN_PROGRESS)
        check_job_transition("in_progress", JobStatus.COMPLETED)

    def test_cancel_from_open_states(self):
        for status in ("pending", "scheduled", "in_progress"):
            check_job_transition(status, JobStatus.CANCELLED)

    def test_same_status_is_allowed(self):
        check_job_transition("completed", JobStatus.COMPLETED)

    def test_skipping_ahead_rejected(self):
        with pytest.raises(ValidationError):
            check_job_transition("pending", JobStatus.COMPLETED)

    def test_terminal_states(self):
        with pytest.raises(ValidationError):
            check_job_transition("completed", JobStatus.IN_PROGRESS)
        with pytest.raises(ValidationError):
            check_job_transition("cancelled", JobStatus.SCHEDULED)


@pytest.mark.integration
class TestJobEndpoints:
    """Tests for the jobs API"""

    def test_create_with_date_is_scheduled(self, auth_client, make_client, job_payload):
        customer = make_client()
        response = auth_client.post(
            "/api/v1/jobs",
            json=job_payload(customer.id, scheduledDate="2026-06-01", scheduledTime="09:30"),
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "scheduled"
        assert data["priority"] == "normal"
        assert data["clientName"] == "Jordan Miles"

    def test_create_without_date_is_pending(self, auth_client, make_client, job_payload):
        customer = make_client()
        response = auth_client.post("/api/v1/jobs", json=job_payload(customer.id, scheduledDate=""))
        assert response.status_code == 201
        assert response.json()["status"] == "pending"
        assert response.json()["scheduledDate"] is None

    def test_missing_fields(self, auth_client, make_client):
        customer = make_client()
        response = auth_client.post("/api/v1/jobs", json={"title": "No address", "serviceType": "mulch", "clientId": customer.id})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Required fields are missing: ")
        assert "jobAddress" in response.json()["error"]

    def test_invalid_time(self, auth_client, make_client, job_payload):
        customer = make_client()
        response = auth_client.post("/api/v1/jobs", json=job_payload(customer.id, scheduledTime="9am"))
        assert response.status_code == 400

    def test_unknown_client(self, auth_client, job_payload):
        response = auth_client.post("/api/v1/jobs", json=job_payload(999))
        assert response.status_code == 404
        assert response.json() == {"error": "Client 999 not found"}

    def test_unknown_job(self, auth_client):
        assert auth_client.get("/api/v1/jobs/999").status_code == 404

    def test_status_changes(self, auth_client, make_job):
        job = make_job(status="pending")
        url = f"/api/v1/jobs/{job.id}/status"

        assert auth_client.patch(url, json={"status": "completed"}).status_code == 400
        assert auth_client.patch(url, json={"status": "scheduled"}).json()["status"] == "scheduled"
        assert auth_client.patch(url, json={"status": "in_progress"}).json()["status"] == "in_progress"
        assert auth_client.patch(url, json={"status": "completed"}).json()["status"] == "completed"

    def test_update_keeps_status(self, auth_client, make_job, job_payload):
        job = make_job(status="in_progress")
        response = auth_client.put(
            f"/api/v1/jobs/{job.id}",
            json=job_payload(job.client_id, title="Renamed", priority="high"),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Renamed"
        assert data["priority"] == "high"
        assert data["status"] == "in_progress"

    def test_list_jobs(self, auth_client, make_job):
        make_job(title="Dated", scheduled_date=date(2026, 6, 2))
        make_job(title="Undated")
        titles = [job["title"] for job in auth_client.get("/api/v1/jobs").json()]
        assert titles == ["Dated", "Undated"]
