"""
Dependency checks behind the health endpoints.

Each check returns "ok" or a short failure marker and never raises.
"""

import logging

from django.apps import apps
from django.core.cache import caches
from django.db import connection
from django.db.migrations.executor import MigrationExecutor

logger = logging.getLogger(__name__)

# Tables the adoption workflow writes in one transaction
WORKFLOW_MODELS = [
    ("adoptions", "AdoptionRequest"),
    ("animals", "Animal"),
    ("activity", "ActivityLog"),
    ("inventory", "InventoryItem"),
]


def _failed(check, exc):
    logger.warning(
        "health_check_failed", extra={"operation": check, "error": str(exc)}
    )
    return "error"


def check_database():
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as exc:
        return _failed("database", exc)
    return "ok"


def check_migrations():
    try:
        executor = MigrationExecutor(connection)
        plan = executor.migration_plan(executor.loader.graph.leaf_nodes())
    except Exception as exc:
        return _failed("migrations", exc)
    return "ok" if not plan else "pending"


def check_cache():
    try:
        cache = caches["default"]
        cache.set("health_check", "ok", timeout=5)
        if cache.get("health_check") != "ok":
            return "error"
    except Exception as exc:
        return _failed("cache", exc)
    return "ok"


def check_workflow_tables():
    """Every workflow table must be readable."""
    for app_label, model_name in WORKFLOW_MODELS:
        try:
            apps.get_model(app_label, model_name).objects.exists()
        except Exception as exc:
            return _failed(f"table:{app_label}.{model_name}", exc)
    return "ok"


def readiness():
    checks = {
        "database": check_database(),
        "migrations": check_migrations(),
        "cache": check_cache(),
        "workflow_tables": check_workflow_tables(),
    }
    ready = all(value == "ok" for value in checks.values())
    return ready, checks
