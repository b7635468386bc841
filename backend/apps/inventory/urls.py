"""
URL routing for inventory endpoints.
"""

from django.urls import path
from apps.inventory import views

app_name = "inventory"

urlpatterns = [
    path("inventory", views.list_inventory, name="list-inventory"),
    path("inventory/alerts", views.inventory_alerts, name="inventory-alerts"),
    path("inventory/low-stock", views.low_stock, name="low-stock"),
    path("inventory/expiring", views.expiring, name="expiring"),
    path("inventory/stats/summary", views.inventory_statistics, name="inventory-statistics"),
    path("inventory/<int:itemId>", views.get_inventory_item, name="get-inventory-item"),
    path("inventory/<int:itemId>/adjust", views.adjust_stock, name="adjust-stock"),
]
