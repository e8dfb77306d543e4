from django.contrib import admin

from .models import Issue, Project, Team, TeamMember


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0
    raw_id_fields = ("user",)


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "is_default", "created_at")
    search_fields = ("name", "owner__email")
    list_filter = ("is_default",)
    inlines = [TeamMemberInline]


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "team", "owner", "is_default", "created_at")
    search_fields = ("name", "owner__email")
    list_filter = ("is_default",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "status", "priority", "project", "assignee", "due_date", "deleted_at")
    list_filter = ("status", "priority", ("deleted_at", admin.EmptyFieldListFilter))
    search_fields = ("title", "description")
    raw_id_fields = ("project", "creator", "assignee")
    ordering = ("-created_at",)
