# ============================================
# issues/selectors/team.py
# ============================================
from typing import Optional

from django.db.models import Count, QuerySet

from issues.models import Team, TeamMember


class TeamSelector:

    @staticmethod
    def get_team_by_id(team_id: int) -> Optional[Team]:
        try:
            return Team.objects.get(id=team_id)
        except Team.DoesNotExist:
            return None

    @staticmethod
    def get_first_owned_team(owner_id: int) -> Optional[Team]:
        return Team.objects.filter(owner_id=owner_id).order_by('created_at', 'id').first()

    @staticmethod
    def is_member(team: Team, user_id: int) -> bool:
        return TeamMember.objects.filter(team=team, user_id=user_id).exists()

    @staticmethod
    def get_teams_for_member(user_id: int) -> QuerySet:
        """Teams the user belongs to, with member and project counts"""
        member_of = TeamMember.objects.filter(user_id=user_id).values('team_id')
        # distinct=True: two joined aggregates would otherwise multiply each other
        return Team.objects.filter(id__in=member_of).annotate(
            member_count=Count('memberships', distinct=True),
            project_count=Count('projects', distinct=True)
        ).order_by('created_at', 'id')
