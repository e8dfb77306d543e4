# ============================================
# issues/models/__init__.py
# ============================================
from .team import Team, TeamMember
from .project import Project
from .issue import Issue

__all__ = [
    'Team',
    'TeamMember',
    'Project',
    'Issue',
]
