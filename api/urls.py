from django.urls import path

from api.views import statuses

urlpatterns = [
    path("v1/statuses", statuses.post_status),
]
