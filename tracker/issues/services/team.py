# ============================================
# issues/services/team.py
# ============================================
import logging

from django.db import transaction

from issues.models import Team, TeamMember

logger = logging.getLogger(__name__)

DEFAULT_TEAM_NAME = 'Personal Team'


class TeamService:

    @staticmethod
    @transaction.atomic
    def create_team(*, name: str, owner, is_default: bool = False) -> Team:
        """Create a team with its creator as OWNER member"""
        team = Team.objects.create(
            name=name,
            owner=owner,
            is_default=is_default
        )
        TeamMember.objects.create(
            team=team,
            user=owner,
            role=TeamMember.Role.OWNER
        )

        logger.info("[teams] created team_id=%s owner_id=%s default=%s", team.id, owner.id, is_default)
        return team

    @staticmethod
    def get_or_create_default_team(*, owner) -> Team:
        """The user's "Personal Team"; at most one per owner (uniq_default_team_per_owner)"""
        team = Team.objects.filter(owner=owner, is_default=True).first()
        if team:
            return team

        team, created = Team.objects.get_or_create(
            owner=owner,
            is_default=True,
            defaults={'name': DEFAULT_TEAM_NAME}
        )
        if created:
            TeamMember.objects.get_or_create(
                team=team,
                user=owner,
                defaults={'role': TeamMember.Role.OWNER}
            )
            logger.info("[teams] provisioned default team_id=%s owner_id=%s", team.id, owner.id)
        return team
