# ============================================
# issues/services/issue.py
# ============================================
import logging
from datetime import datetime
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from issues.models import Issue
from issues.services.project import ProjectService

logger = logging.getLogger(__name__)


class IssueService:

    @staticmethod
    def check_issue_owner(issue: Issue, user_id: int) -> None:
        """Verify the user owns the issue's project"""
        ProjectService._check_project_owner(issue.project, user_id)

    @staticmethod
    @transaction.atomic
    def create_issue(
        *,
        user,
        title: str,
        description: Optional[str] = '',
        status: Optional[str] = None,
        priority: Optional[str] = None,
        due_date: Optional[datetime] = None,
        project_id: Optional[int] = None
    ) -> Issue:
        """Create an issue in the given project, or in the user's default one"""

        if not title or not title.strip():
            raise ValidationError("Title is required")

        if project_id:
            project = ProjectService.get_owned_project(project_id=project_id, user_id=user.id)
        else:
            project = ProjectService.ensure_default_project(user=user)

        issue = Issue.objects.create(
            title=title,
            description=description or '',
            status=status or Issue.DEFAULT_STATUS,
            priority=priority or Issue.Priority.MEDIUM,
            due_date=due_date,
            project=project,
            creator=user,
            assignee=user
        )

        logger.info("[issues] created issue_id=%s project_id=%s user_id=%s", issue.id, project.id, user.id)
        return issue

    @staticmethod
    def update_issue(
        *,
        issue: Issue,
        user_id: int,
        **data
    ) -> Issue:
        """
        Apply the fields present in ``data``. Absent keys are left alone;
        an empty description or a null due date clears the field.
        """
        IssueService.check_issue_owner(issue, user_id)

        if 'title' in data and not (data['title'] or '').strip():
            raise ValidationError({'title': ["Title cannot be empty"]})

        if 'status' in data and not data['status']:
            raise ValidationError({'status': ["Status cannot be empty"]})

        changed = []
        for field in ('title', 'description', 'status', 'priority', 'due_date'):
            if field not in data:
                continue

            value = data[field]
            if field == 'description':
                value = value or ''

            if getattr(issue, field) != value:
                setattr(issue, field, value)
                changed.append(field)

        if changed:
            issue.save(update_fields=changed + ['updated_at'])
            logger.info("[issues] updated issue_id=%s fields=%s", issue.id, ",".join(changed))

        return issue

    @staticmethod
    def soft_delete_issue(*, issue: Issue, user_id: int) -> Issue:
        """Mark the issue deleted; the row stays in the table"""
        IssueService.check_issue_owner(issue, user_id)

        issue.deleted_at = timezone.now()
        issue.save(update_fields=['deleted_at', 'updated_at'])

        logger.info("[issues] soft-deleted issue_id=%s user_id=%s", issue.id, user_id)
        return issue
