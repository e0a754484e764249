# core/services/sql_migration.py
"""
Apply a raw SQL file statement by statement.

The file is split on ``;`` without parsing, so statements containing
semicolons inside ``$$`` bodies or string literals are broken apart.
Execution is best-effort: a failing statement is logged and the rest
still run, nothing is rolled back, and rerunning a file executes every
statement again.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional
import logging

import requests
from django.db import connection

from core.exceptions import SqlExecutionError
from core.settings import get_sql_migration_settings

logger = logging.getLogger(__name__)


def split_sql_statements(sql: str) -> List[str]:
    return [statement.strip() for statement in sql.split(";") if statement.strip()]


class RpcSqlExecutor:
    """Runs statements through a remote ``exec_sql`` RPC function"""

    def __init__(self, base_url, service_key, function_name=None, timeout=None):
        config = get_sql_migration_settings()
        self.url = f"{base_url.rstrip('/')}/rest/v1/rpc/{function_name or config['RPC_FUNCTION']}"
        self.timeout = timeout or config["TIMEOUT"]
        self.headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
            "Content-Type": "application/json",
        }

    def __call__(self, statement):
        try:
            response = requests.post(
                self.url,
                json={"sql": statement},
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SqlExecutionError(f"Request failed: {str(e)}", statement) from e

        if response.status_code >= 400:
            raise SqlExecutionError(
                f"RPC returned {response.status_code}: {response.text}", statement
            )


class LocalSqlExecutor:
    """Runs statements on the project's own database connection"""

    def __call__(self, statement):
        try:
            with connection.cursor() as cursor:
                cursor.execute(statement)
        except Exception as e:
            raise SqlExecutionError(str(e), statement) from e


@dataclass
class MigrationResult:
    total: int = 0
    succeeded: int = 0
    failures: List[dict] = field(default_factory=list)

    @property
    def failed(self):
        return len(self.failures)


def apply_statements(
    statements: List[str],
    executor: Callable[[str], None],
    report: Optional[Callable[[str, bool], None]] = None,
) -> MigrationResult:
    """
    Execute ``statements`` in order, continuing past failures.

    ``report`` receives a progress line and whether it describes a success.
    """
    result = MigrationResult(total=len(statements))

    def emit(line, ok=True):
        if report:
            report(line, ok)

    for index, statement in enumerate(statements, start=1):
        logger.info(f"Executing statement {index}/{result.total}")
        emit(f"Executing statement {index}/{result.total}")
        try:
            executor(statement)
        except SqlExecutionError as e:
            logger.error(f"Statement {index} failed: {str(e)}")
            result.failures.append({"index": index, "error": str(e)})
            emit(f"Statement {index} failed: {str(e)}", False)
            continue

        result.succeeded += 1
        emit(f"Statement {index} completed")

    logger.info(
        f"SQL migration finished: {result.succeeded} succeeded, {result.failed} failed"
    )
    return result
