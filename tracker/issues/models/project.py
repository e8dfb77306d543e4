# ============================================
# issues/models/project.py
# ============================================
from django.conf import settings
from django.db import models
from django.db.models import Q, UniqueConstraint


class Project(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    team = models.ForeignKey(
        'Team',
        on_delete=models.CASCADE,
        related_name='projects'
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='owned_projects'
    )
    # Marks the "My Project" created by default provisioning
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['created_at', 'id']
        constraints = [
            UniqueConstraint(
                fields=['owner'],
                condition=Q(is_default=True),
                name='uniq_default_project_per_owner'
            ),
        ]

    def __str__(self):
        return self.name
