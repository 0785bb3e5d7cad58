"""Phone URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.phones.views import PhoneDetailView, PhoneListView

urlpatterns = [
    path("phones", PhoneListView.as_view(), name="phone-list"),
    path("phones/<str:pk>", PhoneDetailView.as_view(), name="phone-detail"),
]
