# ============================================
# issues/models/issue.py
# ============================================
from django.conf import settings
from django.db import models


class ActiveIssueManager(models.Manager):
    """Issues that have not been soft-deleted"""

    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class Issue(models.Model):
    class Priority(models.TextChoices):
        LOW = 'LOW', 'Low'
        MEDIUM = 'MEDIUM', 'Medium'
        HIGH = 'HIGH', 'High'

    # Status is free-form; these are the columns the board offers
    DEFAULT_STATUS = 'Backlog'
    BOARD_STATUSES = ('Backlog', 'In Progress', 'Done')

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=50, default=DEFAULT_STATUS, db_index=True)
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='issues'
    )
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_issues'
    )
    assignee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_issues'
    )
    due_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    objects = models.Manager()
    active = ActiveIssueManager()

    class Meta:
        db_table = 'issues'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['project', 'status'], name='issues_project_status_idx'),
            models.Index(fields=['assignee'], name='issues_assignee_idx'),
            models.Index(fields=['project', 'deleted_at'], name='issues_project_deleted_idx'),
        ]

    def __str__(self):
        return f"#{self.id} - {self.title}"

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
