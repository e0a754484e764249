from unittest import mock

import pytest
import requests
from django.core.management import CommandError, call_command

from core.exceptions import SqlExecutionError
from core.services.sql_migration import (
    LocalSqlExecutor,
    RpcSqlExecutor,
    apply_statements,
    split_sql_statements,
)


def test_split_drops_empty_fragments():
    sql = "CREATE TABLE a (id int);\n\n  ;DROP TABLE b;  \n"
    assert split_sql_statements(sql) == ["CREATE TABLE a (id int)", "DROP TABLE b"]


def test_split_is_not_aware_of_function_bodies():
    sql = "DO $$ BEGIN PERFORM 1; END $$;"
    assert split_sql_statements(sql) == ["DO $$ BEGIN PERFORM 1", "END $$"]


def test_apply_continues_after_failure():
    executed = []

    def executor(statement):
        executed.append(statement)
        if statement == "bad":
            raise SqlExecutionError("syntax error", statement)

    result = apply_statements(["one", "bad", "three"], executor)

    assert executed == ["one", "bad", "three"]
    assert result.total == 3
    assert result.succeeded == 2
    assert result.failures == [{"index": 2, "error": "syntax error"}]


class TestRpcSqlExecutor:
    def test_posts_statement(self):
        executor = RpcSqlExecutor("https://db.example.test/", "service-key")
        with mock.patch("core.services.sql_migration.requests.post") as post:
            post.return_value.status_code = 200
            executor("SELECT 1")

        args, kwargs = post.call_args
        assert args[0] == "https://db.example.test/rest/v1/rpc/exec_sql"
        assert kwargs["json"] == {"sql": "SELECT 1"}
        assert kwargs["headers"]["apikey"] == "service-key"
        assert kwargs["headers"]["Authorization"] == "Bearer service-key"

    def test_error_status_raises(self):
        executor = RpcSqlExecutor("https://db.example.test", "service-key")
        with mock.patch("core.services.sql_migration.requests.post") as post:
            post.return_value.status_code = 400
            post.return_value.text = "syntax error"
            with pytest.raises(SqlExecutionError, match="400"):
                executor("SELEC 1")

    def test_connection_error_raises(self):
        executor = RpcSqlExecutor("https://db.example.test", "service-key")
        with mock.patch(
            "core.services.sql_migration.requests.post",
            side_effect=requests.exceptions.ConnectionError("refused"),
        ):
            with pytest.raises(SqlExecutionError, match="refused"):
                executor("SELECT 1")


@pytest.mark.django_db
def test_local_executor_wraps_database_errors():
    executor = LocalSqlExecutor()
    executor("SELECT 1")
    with pytest.raises(SqlExecutionError):
        executor("SELECT * FROM table_that_does_not_exist")


@pytest.fixture
def sql_file(tmp_path):
    path = tmp_path / "migration.sql"
    path.write_text("SELECT 1;\nSELECT 2;\n", encoding="utf-8")
    return path


class TestCommand:
    def test_missing_credentials(self, settings, sql_file):
        settings.SUPABASE_URL = None
        settings.SUPABASE_SERVICE_ROLE_KEY = None
        with pytest.raises(CommandError, match="SUPABASE_URL"):
            call_command("apply_sql_migration", str(sql_file))

    def test_missing_file(self, settings, tmp_path):
        with pytest.raises(CommandError, match="not found"):
            call_command("apply_sql_migration", str(tmp_path / "nope.sql"), "--local")

    def test_rpc_run_reports_each_statement(self, settings, sql_file, capsys):
        settings.SUPABASE_URL = "https://db.example.test"
        settings.SUPABASE_SERVICE_ROLE_KEY = "service-key"
        responses = [mock.Mock(status_code=200), mock.Mock(status_code=500, text="boom")]

        with mock.patch("core.services.sql_migration.requests.post", side_effect=responses) as post:
            call_command("apply_sql_migration", str(sql_file))

        assert post.call_count == 2
        out = capsys.readouterr().out
        assert "Executing statement 1/2" in out
        assert "Statement 1 completed" in out
        assert "Statement 2 failed" in out
        assert "1 succeeded, 1 failed" in out

    @pytest.mark.django_db
    def test_local_run(self, sql_file, capsys):
        call_command("apply_sql_migration", str(sql_file), "--local")
        assert "2 succeeded, 0 failed" in capsys.readouterr().out

    def test_default_path_is_shipped(self, settings):
        assert settings.SQL_MIGRATION_SETTINGS["DEFAULT_PATH"].is_file()
