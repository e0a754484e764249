from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.services.sql_migration import (
    LocalSqlExecutor,
    RpcSqlExecutor,
    apply_statements,
    split_sql_statements,
)
from core.settings import get_sql_migration_settings


class Command(BaseCommand):
    help = "Apply a raw SQL migration file one statement at a time"

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            nargs="?",
            help="SQL file to apply (defaults to SQL_MIGRATION_SETTINGS['DEFAULT_PATH'])",
        )
        parser.add_argument(
            "--local",
            action="store_true",
            help="Execute through the Django database connection instead of the remote RPC",
        )

    def handle(self, *args, **options):
        path = options.get("path") or get_sql_migration_settings()["DEFAULT_PATH"]
        if not path:
            raise CommandError("No SQL file given and no default path configured")

        sql_file = Path(path)
        if not sql_file.is_file():
            raise CommandError(f"SQL file not found: {sql_file}")

        executor = self.get_executor(options["local"])

        statements = split_sql_statements(sql_file.read_text(encoding="utf-8"))
        self.stdout.write(f"Applying {sql_file} ({len(statements)} statements)...")

        result = apply_statements(statements, executor, report=self.report)

        summary = f"Migration finished: {result.succeeded} succeeded, {result.failed} failed"
        if result.failed:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))

    def get_executor(self, local):
        if local:
            return LocalSqlExecutor()

        base_url = getattr(settings, "SUPABASE_URL", None)
        service_key = getattr(settings, "SUPABASE_SERVICE_ROLE_KEY", None)
        if not base_url or not service_key:
            raise CommandError(
                "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY. Check your .env file."
            )
        return RpcSqlExecutor(base_url, service_key)

    def report(self, line, ok):
        if ok:
            self.stdout.write(line)
        else:
            self.stdout.write(self.style.ERROR(line))
