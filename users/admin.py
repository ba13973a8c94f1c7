from django.contrib import admin

from users.models import Domain, Identity, User


@admin.register(Domain)
class DomainAdmin(admin.ModelAdmin):
    list_display = ["domain", "service_domain", "local"]
    list_filter = ("local",)
    search_fields = ("domain", "service_domain")


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["email", "created", "admin", "banned", "deleted"]
    search_fields = ["email"]


@admin.register(Identity)
class IdentityAdmin(admin.ModelAdmin):
    list_display = ["id", "handle", "name", "local"]
    list_filter = ("local",)
    raw_id_fields = ["users"]
    search_fields = ["username", "name"]
