"""Checkout URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.stock.views import CheckoutView

urlpatterns = [
    path("checkout", CheckoutView.as_view(), name="checkout"),
]
