from .sql_migration import (
    LocalSqlExecutor,
    MigrationResult,
    RpcSqlExecutor,
    apply_statements,
    split_sql_statements,
)

__all__ = [
    "LocalSqlExecutor",
    "MigrationResult",
    "RpcSqlExecutor",
    "apply_statements",
    "split_sql_statements",
]
