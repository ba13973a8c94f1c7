from django.contrib import admin
from django.db import models

from activities.models import Hashtag, Post, PostAttachment


@admin.register(Hashtag)
class HashtagAdmin(admin.ModelAdmin):
    list_display = ["hashtag", "created"]
    search_fields = ["hashtag"]
    readonly_fields = ["created"]


@admin.register(PostAttachment)
class PostAttachmentAdmin(admin.ModelAdmin):
    list_display = ["id", "post", "author", "mimetype", "created"]
    list_filter = ["mimetype"]
    search_fields = ["name"]
    raw_id_fields = ["post", "author"]


class PostAttachmentInline(admin.StackedInline):
    model = PostAttachment
    extra = 0


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["id", "author", "visibility", "created"]
    list_filter = ("visibility", "sensitive", "created")
    raw_id_fields = ["author", "in_reply_to", "mentions", "hashtags", "application"]
    search_fields = ["content", "search_handle", "search_service_handle"]
    inlines = [PostAttachmentInline]
    readonly_fields = ["created", "updated"]

    def get_search_results(self, request, queryset, search_term):
        from django.db.models.functions import Concat

        queryset = queryset.annotate(
            search_handle=Concat(
                "author__username", models.Value("@"), "author__domain_id"
            ),
            search_service_handle=Concat(
                "author__username", models.Value("@"), "author__domain__service_domain"
            ),
        )
        return super().get_search_results(request, queryset, search_term)

    def has_add_permission(self, request, obj=None):
        """
        Disables admin creation of posts as it would skip the submission
        pipeline (media checks, distribution)
        """
        return False
