from django.contrib import admin

from miniq.models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    """
    Tasks only ever come from the dispatcher, so the admin just shows them
    """

    list_display = ["id", "type", "subject", "created", "completed", "failed"]
    list_filter = ["type", "created"]
    search_fields = ["subject"]
    ordering = ["-created"]
    readonly_fields = [
        "type",
        "priority",
        "subject",
        "payload",
        "error",
        "created",
        "completed",
        "failed",
        "locked",
        "locked_by",
    ]

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False
