"""Parenting activity routes — couple listing and the status PATCH.

Invariants:
    - PATCH COMPLETED writes exactly one storybook entry; SKIPPED writes none
    - An invalid status is rejected before any write
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import select

from nestwell.models import ActivityTemplate, Child, ScheduledActivity, StorybookEntry

URL = "/api/v1/parenting-activities"


@pytest.fixture
async def activity(test_db):
    template = ActivityTemplate(title="Finger painting", category="CREATIVITY")
    child = Child(couple_id="c1", name="Mia")
    test_db.add_all([template, child])
    await test_db.flush()
    scheduled = ScheduledActivity(
        child_id=child.id, activity_template_id=template.id,
        scheduled_for=datetime(2026, 5, 1, 16, tzinfo=timezone.utc),
    )
    test_db.add(scheduled)
    await test_db.commit()
    return scheduled


async def _entries(db):
    return (await db.execute(select(StorybookEntry))).scalars().all()


async def test_list_for_couple(client, activity):
    res = await client.get(URL, params={"coupleId": "c1"})
    assert res.status_code == 200
    [item] = res.json()
    assert item["id"] == str(activity.id)
    assert item["status"] == "PENDING"
    assert item["activity_template"]["category"] == "CREATIVITY"


async def test_list_for_couple_without_children(client, activity):
    res = await client.get(URL, params={"coupleId": "c9"})
    assert res.json() == []


async def test_list_requires_couple_id(client):
    res = await client.get(URL)
    assert res.status_code == 400


async def test_complete_activity_creates_storybook_entry(client, test_db, activity):
    res = await client.patch(f"{URL}/{activity.id}", json={"status": "COMPLETED"})
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "COMPLETED"
    assert data["completed_at"] is not None

    [entry] = await _entries(test_db)
    assert entry.activity_type == "CREATIVITY"
    assert entry.completion_data == {"title": "Finger painting"}


async def test_skip_activity_creates_nothing(client, test_db, activity):
    res = await client.patch(f"{URL}/{activity.id}", json={"status": "SKIPPED"})
    assert res.status_code == 200
    assert res.json()["completed_at"] is None
    assert await _entries(test_db) == []


async def test_invalid_status_is_rejected_without_writes(client, test_db, activity):
    res = await client.patch(f"{URL}/{activity.id}", json={"status": "DONE"})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["path"] == "status"
    assert await _entries(test_db) == []


async def test_unknown_activity_is_404(client):
    res = await client.patch(f"{URL}/{uuid4()}", json={"status": "COMPLETED"})
    assert res.status_code == 404
