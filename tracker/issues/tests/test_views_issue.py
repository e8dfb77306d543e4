import pytest
from datetime import datetime, timedelta, timezone as dt_timezone
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from issues.models import Issue, Project, Team

User = get_user_model()


@pytest.mark.django_db
def test_create_issue_for_fresh_user(api_client, user):
    resp = api_client.post("/api/issues", {"title": "Fix bug"}, format="json")

    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["title"] == "Fix bug"
    assert body["status"] == "Backlog"
    assert body["priority"] == "MEDIUM"
    assert body["assigneeId"] == user.id
    assert body["creatorId"] == user.id
    assert body["deletedAt"] is None

    project = Project.objects.get(owner=user)
    assert body["projectId"] == project.id
    assert project.name == "My Project"
    assert Team.objects.get(owner=user).name == "Personal Team"


@pytest.mark.django_db
def test_create_issue_with_explicit_fields(api_client, project):
    payload = {
        "title": "Ship it",
        "description": "before friday",
        "status": "In Progress",
        "priority": "HIGH",
        "dueDate": "2025-05-01T12:00:00Z",
        "projectId": project.id,
    }
    resp = api_client.post("/api/issues", payload, format="json")

    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["status"] == "In Progress"
    assert body["priority"] == "HIGH"
    assert body["description"] == "before friday"
    assert body["projectId"] == project.id
    assert body["dueDate"].startswith("2025-05-01T12:00:00")


@pytest.mark.django_db
def test_create_issue_requires_title(api_client):
    resp = api_client.post("/api/issues", {"description": "no title"}, format="json")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Title is required"
    assert not Issue.objects.exists()


@pytest.mark.django_db
def test_create_issue_rejects_unknown_priority(api_client):
    resp = api_client.post("/api/issues", {"title": "x", "priority": "URGENT"}, format="json")

    assert resp.status_code == 400
    assert "priority" in resp.json()["errors"]


@pytest.mark.django_db
def test_create_issue_in_foreign_project(api_client, foreign_project):
    resp = api_client.post("/api/issues", {"title": "x", "projectId": foreign_project.id}, format="json")

    assert resp.status_code == 403


@pytest.mark.django_db
def test_endpoints_require_login(anon_client):
    assert anon_client.get("/api/issues").status_code == 401
    assert anon_client.put("/api/issues", {"id": 1}, format="json").status_code == 401
    assert anon_client.delete("/api/issues", {"id": 1}, format="json").status_code == 401

    resp = anon_client.post("/api/issues", {"title": "x"}, format="json")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Please login to use the service"


@pytest.mark.django_db
def test_stale_session_user_not_found(db):
    ghost = User.objects.create_user(email="ghost@example.com", password="secret123")
    client = APIClient()
    client.force_login(ghost)
    ghost.delete()

    resp = client.get("/api/issues")

    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


@pytest.mark.django_db
def test_session_login_is_accepted(user, project, make_issue):
    make_issue(project, title="visible")
    client = APIClient()
    client.force_login(user)

    resp = client.get("/api/issues")

    assert resp.status_code == 200
    assert [i["title"] for i in resp.json()] == ["visible"]


@pytest.mark.django_db
def test_list_issues_scoped_to_owner(api_client, project, foreign_project, make_issue):
    make_issue(project, title="mine")
    make_issue(project, title="deleted", deleted_at=timezone.now())
    make_issue(foreign_project, title="theirs")

    resp = api_client.get("/api/issues")

    assert resp.status_code == 200
    body = resp.json()
    assert [i["title"] for i in body] == ["mine"]
    assert body[0]["assignee"]["email"] == "alice@example.com"


@pytest.mark.django_db
def test_list_issues_query_params(api_client, project, make_issue):
    make_issue(project, title="low", priority="LOW", age=3)
    make_issue(project, title="high", priority="HIGH", age=2, status="Done")
    make_issue(project, title="medium", priority="MEDIUM", age=1)

    resp = api_client.get("/api/issues", {"sortBy": "priority", "sortOrder": "asc"})
    assert [i["title"] for i in resp.json()] == ["low", "medium", "high"]

    resp = api_client.get("/api/issues", {"sortBy": "priority"})
    assert [i["title"] for i in resp.json()] == ["high", "medium", "low"]

    resp = api_client.get("/api/issues", {"status": "Done", "search": ""})
    assert [i["title"] for i in resp.json()] == ["high"]


@pytest.mark.django_db
def test_list_issues_filter_params(api_client, project, other_user, make_issue):
    make_issue(project, title="april", due_date=datetime(2025, 4, 10, 12, tzinfo=dt_timezone.utc))
    make_issue(project, title="may", due_date=datetime(2025, 5, 10, 12, tzinfo=dt_timezone.utc), assignee=other_user)
    make_issue(project, title="june", due_date=datetime(2025, 6, 10, 12, tzinfo=dt_timezone.utc))
    make_issue(project, title="undated")

    def titles(**params):
        resp = api_client.get("/api/issues", params)
        assert resp.status_code == 200, resp.content
        return sorted(i["title"] for i in resp.json())

    assert titles(hasDueDate="true") == ["april", "june", "may"]
    assert titles(assigneeId=other_user.id) == ["may"]
    assert titles(dueDateFrom="2025-05-01", dueDateTo="2025-06-01") == ["may"]
    assert titles(dueDateFrom="2025-05-01") == ["june", "may"]
    assert titles(dueDateTo="2025-05-01") == ["april"]


@pytest.mark.django_db
def test_list_issues_sort_by_updated_at(api_client, project, make_issue):
    now = timezone.now()
    for title, hours in [("stale", 5), ("fresh", 1), ("middle", 3)]:
        issue = make_issue(project, title=title)
        Issue.objects.filter(pk=issue.pk).update(updated_at=now - timedelta(hours=hours))

    resp = api_client.get("/api/issues", {"sortBy": "updatedAt"})
    assert [i["title"] for i in resp.json()] == ["fresh", "middle", "stale"]

    resp = api_client.get("/api/issues", {"sortBy": "updatedAt", "sortOrder": "asc"})
    assert [i["title"] for i in resp.json()] == ["stale", "middle", "fresh"]


@pytest.mark.django_db
def test_list_issues_bad_date(api_client):
    resp = api_client.get("/api/issues", {"dueDateFrom": "not-a-date"})

    assert resp.status_code == 400


@pytest.mark.django_db
def test_issue_detail(api_client, project, foreign_project, make_issue):
    mine = make_issue(project, title="mine")
    theirs = make_issue(foreign_project, title="theirs")

    assert api_client.get(f"/api/issues/{mine.id}").json()["title"] == "mine"
    assert api_client.get(f"/api/issues/{theirs.id}").status_code == 403
    assert api_client.get("/api/issues/9999").status_code == 404


@pytest.mark.django_db
def test_update_issue(api_client, project, make_issue):
    issue = make_issue(project, title="Old", description="details", status="Backlog")

    resp = api_client.put("/api/issues", {"id": issue.id, "status": "In Progress", "priority": "HIGH"}, format="json")

    assert resp.status_code == 200, resp.content
    body = resp.json()
    assert body["status"] == "In Progress"
    assert body["priority"] == "HIGH"
    assert body["title"] == "Old"
    assert body["description"] == "details"


@pytest.mark.django_db
def test_update_issue_clears_description(api_client, project, make_issue):
    issue = make_issue(project, description="details")

    resp = api_client.put("/api/issues", {"id": issue.id, "description": ""}, format="json")

    assert resp.status_code == 200
    assert resp.json()["description"] == ""


@pytest.mark.django_db
def test_update_issue_blank_title_rejected(api_client, project, make_issue):
    issue = make_issue(project, title="Keep")

    resp = api_client.put("/api/issues", {"id": issue.id, "title": ""}, format="json")

    assert resp.status_code == 400
    issue.refresh_from_db()
    assert issue.title == "Keep"


@pytest.mark.django_db
def test_update_issue_errors(api_client, foreign_project, make_issue):
    resp = api_client.put("/api/issues", {"status": "Done"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Issue ID is required"

    assert api_client.put("/api/issues", {"id": 9999}, format="json").status_code == 404

    theirs = make_issue(foreign_project)
    resp = api_client.put("/api/issues", {"id": theirs.id, "status": "Done"}, format="json")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_forbidden_wins_over_invalid_body(api_client, foreign_project, make_issue):
    theirs = make_issue(foreign_project)

    resp = api_client.put("/api/issues", {"id": theirs.id, "priority": "NOPE", "title": ""}, format="json")
    assert resp.status_code == 403

    resp = api_client.delete("/api/issues", {"id": theirs.id, "junk": [1, 2]}, format="json")
    assert resp.status_code == 403
    theirs.refresh_from_db()
    assert theirs.deleted_at is None


@pytest.mark.django_db
def test_delete_issue_twice(api_client, project, make_issue):
    issue = make_issue(project)

    first = api_client.delete("/api/issues", {"id": issue.id}, format="json")
    assert first.status_code == 200
    assert first.json() == {"message": "Issue deleted successfully", "id": issue.id}

    issue.refresh_from_db()
    assert issue.deleted_at is not None

    second = api_client.delete("/api/issues", {"id": issue.id}, format="json")
    assert second.status_code == 404

    assert api_client.get("/api/issues").json() == []


@pytest.mark.django_db
def test_delete_issue_requires_id(api_client):
    resp = api_client.delete("/api/issues", {}, format="json")

    assert resp.status_code == 400
