# ============================================
# issues/selectors/issue.py
# ============================================
from datetime import datetime
from typing import List, Optional

from django.db.models import QuerySet

from issues.models import Issue

PRIORITY_RANK = {
    Issue.Priority.HIGH: 3,
    Issue.Priority.MEDIUM: 2,
    Issue.Priority.LOW: 1,
}

# Sort keys handed straight to the database
SORT_FIELDS = {
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
    'dueDate': 'due_date',
}

SUMMARY_ISSUE_LIMIT = 20


def sort_by_priority(issues: List[Issue], descending: bool = True) -> List[Issue]:
    """Stable in-memory sort: HIGH > MEDIUM > LOW > anything else"""
    return sorted(
        issues,
        key=lambda issue: PRIORITY_RANK.get(issue.priority, 0),
        reverse=descending
    )


class IssueSelector:

    @staticmethod
    def get_active_issue_by_id(issue_id: int) -> Optional[Issue]:
        """Get a non-deleted issue with its project"""
        try:
            return Issue.active.select_related('project', 'assignee').get(id=issue_id)
        except Issue.DoesNotExist:
            return None

    @staticmethod
    def get_issues_list(
        *,
        owner_id: int,
        search: str = None,
        status: str = None,
        assignee_id: int = None,
        priority: str = None,
        has_due_date: bool = False,
        due_date_from: Optional[datetime] = None,
        due_date_to: Optional[datetime] = None,
        sort_by: str = 'createdAt',
        sort_order: str = 'desc'
    ) -> List[Issue]:
        """Active issues in projects owned by the user, filtered and sorted"""
        queryset = Issue.active.filter(
            project__owner_id=owner_id
        ).select_related('assignee')

        if search:
            queryset = queryset.filter(title__icontains=search)

        if status:
            queryset = queryset.filter(status=status)

        if assignee_id:
            queryset = queryset.filter(assignee_id=assignee_id)

        if priority:
            queryset = queryset.filter(priority=priority)

        if has_due_date:
            queryset = queryset.filter(due_date__isnull=False)

        if due_date_from:
            queryset = queryset.filter(due_date__gte=due_date_from)

        if due_date_to:
            queryset = queryset.filter(due_date__lte=due_date_to)

        descending = sort_order != 'asc'

        if sort_by == 'priority':
            issues = list(queryset.order_by('-created_at', '-id'))
            return sort_by_priority(issues, descending=descending)

        field = SORT_FIELDS.get(sort_by)
        if field is None:
            # Unknown sort keys fall back to newest first
            field, descending = 'created_at', True

        prefix = '-' if descending else ''
        return list(queryset.order_by(f'{prefix}{field}', f'{prefix}id'))

    @staticmethod
    def get_recent_issues(owner_id: int, limit: int = SUMMARY_ISSUE_LIMIT) -> QuerySet:
        """Most recently created active issues across the user's projects"""
        return Issue.active.filter(
            project__owner_id=owner_id
        ).order_by('-created_at', '-id')[:limit]
