import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from issues.models import Issue, Project, Team, TeamMember

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(email="alice@example.com", password="secret123", name="Alice")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email="bob@example.com", password="secret123", name="Bob")


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def anon_client():
    return APIClient()


def _make_project(owner, name="Backend"):
    team = Team.objects.create(name=f"{name} Team", owner=owner)
    TeamMember.objects.create(team=team, user=owner, role=TeamMember.Role.OWNER)
    return Project.objects.create(name=name, team=team, owner=owner)


@pytest.fixture
def project(user):
    return _make_project(user)


@pytest.fixture
def foreign_project(other_user):
    return _make_project(other_user, name="Bob's project")


@pytest.fixture
def make_issue():
    """
    Build an issue; ``age`` (minutes) pushes created_at into the past so
    ordering by creation time is deterministic.
    """
    base = timezone.now()

    def _make(project, title="Issue", age=0, **fields):
        fields.setdefault("creator", project.owner)
        fields.setdefault("assignee", project.owner)
        issue = Issue.objects.create(project=project, title=title, **fields)
        Issue.objects.filter(pk=issue.pk).update(created_at=base - timedelta(minutes=age))
        issue.refresh_from_db()
        return issue

    return _make
