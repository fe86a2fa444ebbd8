"""
Tests for saved jobs and application status tracking.
"""

import pytest

from career_guide.core.security import create_access_token, get_password_hash
from career_guide.db.models import User

URL = "/api/jobs/saved"

JOB = {
    "jobId": "js-123",
    "title": "Junior Data Analyst",
    "company": "Acme",
    "location": "Remote",
    "url": "https://jobs.example.com/js-123",
}


async def save(client, headers, **overrides):
    return await client.post(URL, json={**JOB, **overrides}, headers=headers)


class TestAuth:
    """All saved-job routes require a user."""

    @pytest.mark.asyncio
    async def test_list_requires_auth(self, client):
        resp = await client.get(URL)
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_save_requires_auth(self, client):
        resp = await client.post(URL, json=JOB)
        assert resp.status_code == 401


class TestSaveJob:
    """Tests for POST /api/jobs/saved."""

    @pytest.mark.asyncio
    async def test_save(self, client, auth_headers):
        resp = await save(client, auth_headers, source=None)

        assert resp.status_code == 200
        job = resp.json()["job"]
        assert job["jobId"] == "js-123"
        assert job["status"] == "saved"
        assert job["source"] == "jsearch"
        assert job["id"]

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, client, auth_headers):
        resp = await client.post(URL, json={"jobId": "js-1", "title": "x"}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing required fields"}

    @pytest.mark.asyncio
    async def test_saving_twice_keeps_one_row(self, client, auth_headers):
        first = await save(client, auth_headers)
        second = await save(client, auth_headers, title="Renamed")

        assert second.json()["job"]["id"] == first.json()["job"]["id"]
        assert second.json()["job"]["title"] == "Junior Data Analyst"

        listed = await client.get(URL, headers=auth_headers)
        assert len(listed.json()["jobs"]) == 1


class TestStatusAndDelete:
    """Tests for PATCH and DELETE."""

    @pytest.mark.asyncio
    async def test_update_status(self, client, auth_headers):
        job_id = (await save(client, auth_headers)).json()["job"]["id"]

        resp = await client.patch(URL, json={"id": job_id, "status": "interviewing"}, headers=auth_headers)

        assert resp.json() == {"updated": 1}
        jobs = (await client.get(URL, headers=auth_headers)).json()["jobs"]
        assert jobs[0]["status"] == "interviewing"

    @pytest.mark.asyncio
    async def test_invalid_status(self, client, auth_headers):
        job_id = (await save(client, auth_headers)).json()["job"]["id"]

        resp = await client.patch(URL, json={"id": job_id, "status": "hired"}, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid id or status"}

    @pytest.mark.asyncio
    async def test_delete(self, client, auth_headers):
        job_id = (await save(client, auth_headers)).json()["job"]["id"]

        resp = await client.delete(URL, params={"id": job_id}, headers=auth_headers)

        assert resp.json() == {"ok": True}
        assert (await client.get(URL, headers=auth_headers)).json()["jobs"] == []

    @pytest.mark.asyncio
    async def test_delete_requires_id(self, client, auth_headers):
        resp = await client.delete(URL, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing id"}

    @pytest.mark.asyncio
    async def test_other_users_job_untouched(self, client, auth_headers, db):
        job_id = (await save(client, auth_headers)).json()["job"]["id"]

        other = User(email="graduate@example.com", password_hash=get_password_hash("graduate123"))
        db.add(other)
        await db.commit()
        other_headers = {"Authorization": f"Bearer {create_access_token({'sub': other.email})}"}

        patched = await client.patch(URL, json={"id": job_id, "status": "offer"}, headers=other_headers)
        await client.delete(URL, params={"id": job_id}, headers=other_headers)

        assert patched.json() == {"updated": 0}
        assert (await client.get(URL, headers=other_headers)).json()["jobs"] == []
        jobs = (await client.get(URL, headers=auth_headers)).json()["jobs"]
        assert [(j["id"], j["status"]) for j in jobs] == [(job_id, "saved")]
