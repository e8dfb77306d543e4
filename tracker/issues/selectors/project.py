# ============================================
# issues/selectors/project.py
# ============================================
from typing import Optional

from django.db.models import Count, Q, QuerySet

from issues.models import Project


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project by ID"""
        try:
            return Project.objects.select_related('team').get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_first_owned_project(owner_id: int) -> Optional[Project]:
        """Oldest project owned by the user"""
        return Project.objects.filter(owner_id=owner_id).order_by('created_at', 'id').first()

    @staticmethod
    def get_projects_by_owner(owner_id: int) -> QuerySet:
        """Projects owned by the user with their active issue count"""
        return Project.objects.filter(owner_id=owner_id).select_related('team').annotate(
            issue_count=Count('issues', filter=Q(issues__deleted_at__isnull=True))
        ).order_by('created_at', 'id')
