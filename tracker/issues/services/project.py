# ============================================
# issues/services/project.py
# ============================================
import logging

from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.http import Http404

from issues.models import Project
from issues.selectors.project import ProjectSelector
from issues.selectors.team import TeamSelector
from issues.services.team import TeamService

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = 'My Project'
DEFAULT_PROJECT_DESCRIPTION = 'Your first project'


class ProjectService:

    @staticmethod
    def _check_project_owner(project: Project, user_id: int) -> None:
        """Only the project owner may touch the project or its issues"""
        if project.owner_id != user_id:
            raise PermissionDenied("Forbidden")

    @staticmethod
    def get_owned_project(*, project_id: int, user_id: int) -> Project:
        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise Http404("Project not found")

        ProjectService._check_project_owner(project, user_id)
        return project

    @staticmethod
    def ensure_default_project(*, user) -> Project:
        """
        Return the user's first project, provisioning a team and
        "My Project" when the user owns none.
        """
        project = ProjectSelector.get_first_owned_project(user.id)
        if project:
            return project

        logger.info("[issues] no project for user_id=%s, provisioning default", user.id)

        with transaction.atomic():
            team = TeamSelector.get_first_owned_team(user.id)
            if team is None:
                team = TeamService.get_or_create_default_team(owner=user)

            project, created = Project.objects.get_or_create(
                owner=user,
                is_default=True,
                defaults={
                    'name': DEFAULT_PROJECT_NAME,
                    'description': DEFAULT_PROJECT_DESCRIPTION,
                    'team': team,
                }
            )

        if created:
            logger.info("[issues] provisioned default project_id=%s team_id=%s", project.id, team.id)
        return project

    @staticmethod
    def create_project(*, owner, name: str, team_id: int, description: str = '') -> Project:
        """Create a project inside a team the owner belongs to"""
        team = TeamSelector.get_team_by_id(team_id)
        if team is None:
            raise Http404("Team not found")

        if not TeamSelector.is_member(team, owner.id):
            raise PermissionDenied("Only team members can create projects in this team")

        project = Project.objects.create(
            name=name,
            description=description or '',
            team=team,
            owner=owner
        )

        logger.info("[issues] created project_id=%s team_id=%s owner_id=%s", project.id, team.id, owner.id)
        return project
