"""
URL configuration for InternTrack.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/reports/', include('core.urls_api')),
    path('', include('core.urls')),
]
