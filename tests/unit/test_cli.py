"""Unit tests for CLI module."""

import json
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest

from vault_lifecycle import cli
from vault_lifecycle.cli import (
    COPY_OVERRIDES,
    DELETE_OVERRIDES,
    build_environment,
    create_parser,
    file_info,
)
from vault_lifecycle.domain.errors import EnumerationError
from vault_lifecycle.domain.job_run import JobRun
from vault_lifecycle.infrastructure.account_context import AccountContext

ENV_NAMES = [
    *DELETE_OVERRIDES.values(),
    *COPY_OVERRIDES.values(),
    "DRY_RUN",
    "AWS_REGION",
    "AWS_ACCOUNT_ID",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove job settings from the process environment."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def finished_run() -> JobRun:
    """Create a finished run."""
    job_run = JobRun(
        job_name="delete",
        vault_name="my-vault",
        started_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    job_run.record_page(3)
    job_run.finish()
    return job_run


def test_file_info() -> None:
    """Test file_info function returns expected metadata."""
    info = file_info()
    assert info["name"] == "cli"
    assert info["version"] == "0.1.0"
    assert info["author"] == "John Ayers"


def test_parser_creation() -> None:
    """Test parser creation."""
    parser = create_parser()
    assert parser.prog == "vault-lifecycle"


def test_parser_version() -> None:
    """Test version flag."""
    parser = create_parser()

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])

    assert exc_info.value.code == 0


def test_parser_delete_command() -> None:
    """Test delete command parsing."""
    parser = create_parser()
    args = parser.parse_args(
        ["--dry-run", "delete", "--vault", "my-vault", "--expiry-days", "30"]
    )

    assert args.command == "delete"
    assert args.dry_run is True
    assert args.vault == "my-vault"
    assert args.expiry_days == 30


def test_parser_copy_monthly_command() -> None:
    """Test copy-monthly command parsing."""
    parser = create_parser()
    args = parser.parse_args(
        [
            "--region",
            "us-west-2",
            "copy-monthly",
            "--source-vault",
            "src",
            "--destination-vault",
            "dst",
            "--instance-id",
            "i-0abc123",
            "--lookback-years",
            "3",
            "--failure-policy",
            "abort",
        ]
    )

    assert args.command == "copy-monthly"
    assert args.region == "us-west-2"
    assert args.lookback_years == 3
    assert args.failure_policy == "abort"


def test_parser_rejects_unknown_failure_policy() -> None:
    """Test that failure policy choices are enforced."""
    parser = create_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["copy", "--failure-policy", "retry"])


def test_build_environment_overrides(monkeypatch) -> None:
    """Test that options override environment variables."""
    monkeypatch.setenv("BACKUP_VAULT_NAME", "env-vault")
    monkeypatch.setenv("EXPIRY_DAYS", "90")
    args = create_parser().parse_args(
        ["--dry-run", "--region", "eu-west-1", "delete", "--vault", "cli-vault"]
    )

    environ = build_environment(args, DELETE_OVERRIDES)

    assert environ["BACKUP_VAULT_NAME"] == "cli-vault"
    assert environ["EXPIRY_DAYS"] == "90"
    assert environ["DRY_RUN"] == "true"
    assert environ["AWS_REGION"] == "eu-west-1"
    assert "AWS_ACCOUNT_ID" not in environ


def test_cmd_delete(finished_run, capsys) -> None:
    """Test the delete command with JSON output."""
    args = create_parser().parse_args(
        ["--output", "json", "delete", "--vault", "my-vault", "--expiry-days", "30"]
    )

    with (
        patch.object(cli, "setup_logger"),
        patch.object(cli, "AWSBackupRepository") as repo_cls,
        patch.object(cli, "run_delete_job", return_value=finished_run) as run_job,
    ):
        exit_code = cli.cmd_delete(args)

    assert exit_code == 0
    config = run_job.call_args.args[0]
    assert config.vault_name == "my-vault"
    assert config.expiry_days == 30
    assert run_job.call_args.args[1] is repo_cls.return_value
    output = json.loads(capsys.readouterr().out)
    assert output["vault"] == "my-vault"
    assert output["state"] == "done"


def test_cmd_delete_missing_vault() -> None:
    """Test that a missing vault is reported as exit code 1."""
    args = create_parser().parse_args(["delete"])

    with (
        patch.object(cli, "setup_logger"),
        patch.object(cli, "run_delete_job") as run_job,
    ):
        exit_code = cli.cmd_delete(args)

    assert exit_code == 1
    run_job.assert_not_called()


def test_cmd_delete_run_failure() -> None:
    """Test that a failed run is reported as exit code 1."""
    args = create_parser().parse_args(["delete", "--vault", "my-vault"])

    with (
        patch.object(cli, "setup_logger"),
        patch.object(cli, "AWSBackupRepository"),
        patch.object(
            cli, "run_delete_job", side_effect=EnumerationError("AccessDenied", "my-vault")
        ),
    ):
        exit_code = cli.cmd_delete(args)

    assert exit_code == 1


def test_cmd_copy_monthly(finished_run, capsys) -> None:
    """Test the copy-monthly command."""
    args = create_parser().parse_args(
        [
            "copy-monthly",
            "--source-vault",
            "src",
            "--destination-vault",
            "dst",
            "--instance-id",
            "i-0abc123",
            "--move-to-cold-storage-days",
            "0",
        ]
    )
    account = AccountContext(region="us-east-1", account_id="123456789012")

    with (
        patch.object(cli, "setup_logger"),
        patch.object(cli, "resolve_account_context", return_value=account),
        patch.object(cli, "AWSBackupRepository"),
        patch.object(cli, "run_copy_job", return_value=finished_run) as run_job,
    ):
        exit_code = cli.cmd_copy(args)

    assert exit_code == 0
    config = run_job.call_args.args[0]
    assert config.source_vault == "src"
    assert config.lifecycle.to_request() == {"DeleteAfterDays": 120}
    assert run_job.call_args.args[2] is account
    assert run_job.call_args.kwargs["first_of_month_only"] is True
    assert "State: done" in capsys.readouterr().out


def test_main_without_command(capsys) -> None:
    """Test that main exits with code 1 when no command is given."""
    with patch("sys.argv", ["vault-lifecycle"]):
        with pytest.raises(SystemExit) as exc_info:
            cli.main()

    assert exc_info.value.code == 1


def test_main_dispatches(finished_run) -> None:
    """Test that main dispatches to the command and exits with its code."""
    with (
        patch("sys.argv", ["vault-lifecycle", "delete", "--vault", "my-vault"]),
        patch.object(cli, "setup_logger"),
        patch.object(cli, "AWSBackupRepository", Mock()),
        patch.object(cli, "run_delete_job", return_value=finished_run),
    ):
        with pytest.raises(SystemExit) as exc_info:
            cli.main()

    assert exc_info.value.code == 0
