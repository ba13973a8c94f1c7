from django.apps import AppConfig


class MiniqConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "miniq"
