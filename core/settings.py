# core/settings.py
from django.conf import settings

DEFAULT_SQL_MIGRATION_SETTINGS = {
    "DEFAULT_PATH": None,
    "RPC_FUNCTION": "exec_sql",
    "TIMEOUT": 30,
}


def get_sql_migration_settings():
    """Get SQL migration settings with defaults"""
    user_settings = getattr(settings, "SQL_MIGRATION_SETTINGS", {})
    return {**DEFAULT_SQL_MIGRATION_SETTINGS, **user_settings}
