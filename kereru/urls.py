from django.contrib import admin as djadmin
from django.urls import include, path

urlpatterns = [
    # API
    path("api/", include("api.urls")),
    # Django admin
    path("djadmin/", djadmin.site.urls),
]
