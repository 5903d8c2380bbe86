"""
URL mappings for the portal API.
"""

from django.urls import path

from portal import views

app_name = "portal"

urlpatterns = [
    path("", views.ActionDispatchView.as_view(), name="dispatch"),
]
