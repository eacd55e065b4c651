"""Tests for the dotnet-versions command."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dotnet_versions.cli.cli import USAGE_LINES, cli
from dotnet_versions.core.context import DetectorContext
from tests.fakes.context import fake_context
from tests.fakes.registry import FakeConfigTree
from tests.fakes.shell import FakeShell
from tests.fakes.user_prompt import FakeUserPrompt

REGISTRY = {
    "SOFTWARE": {
        "Microsoft": {
            "NET Framework Setup": {
                "NDP": {
                    "v3.5": {"Version": "3.5.30729.4926", "SP": 1, "Install": 1},
                    "v4": {"Full": {"Release": 461808}},
                },
            },
        },
    },
}


def invoke(ctx: DetectorContext, args: list[str]):
    runner = CliRunner()
    return runner.invoke(cli, args, obj=ctx)


@pytest.mark.parametrize("flag", ["-help", "--help", "/help", "-?", "--?", "/?"])
def test_help_prints_usage_without_detection(flag: str) -> None:
    ctx = fake_context(registry_data=REGISTRY, shell_output="8.0.100")

    result = invoke(ctx, [flag])

    assert result.exit_code == 0
    assert result.output == "\n".join(USAGE_LINES) + "\n"
    assert isinstance(ctx.registry, FakeConfigTree)
    assert ctx.registry.access_count == 0
    assert isinstance(ctx.shell, FakeShell)
    assert ctx.shell.script_calls == []
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 0


def test_help_does_not_build_a_context() -> None:
    with patch("dotnet_versions.cli.cli.create_context") as mock_create:
        result = CliRunner().invoke(cli, ["/?"])

    assert result.exit_code == 0
    mock_create.assert_not_called()


def test_usage_is_two_lines() -> None:
    assert len(USAGE_LINES) == 2


def test_no_arguments_runs_detection_and_waits() -> None:
    ctx = fake_context(registry_data=REGISTRY, shell_output="8.0.100")

    result = invoke(ctx, [])

    assert result.exit_code == 0
    assert result.output == "8.0.100\n3.5.30729.4926 Service Pack 1\n4.7.2\n"
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 1


@pytest.mark.parametrize("flag", ["-b", "--b", "/b", "-B", "--B", "/B"])
def test_batch_mode_skips_wait(flag: str) -> None:
    ctx = fake_context(registry_data=REGISTRY)

    result = invoke(ctx, [flag])

    assert result.exit_code == 0
    assert result.output == "3.5.30729.4926 Service Pack 1\n4.7.2\n"
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 0


@pytest.mark.parametrize("argument", ["--verbose", "/x", "extra"])
def test_unrecognized_argument_runs_interactively(argument: str) -> None:
    ctx = fake_context(registry_data=REGISTRY)

    result = invoke(ctx, [argument])

    assert result.exit_code == 0
    assert "4.7.2" in result.output
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 1


def test_batch_flag_after_another_argument_is_ignored() -> None:
    ctx = fake_context(registry_data=REGISTRY)

    invoke(ctx, ["extra", "-b"])

    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 1


def test_missing_shell_still_reports_registry_versions() -> None:
    ctx = fake_context(registry_data=REGISTRY, shell_output="")

    result = invoke(ctx, ["-b"])

    assert result.output == "3.5.30729.4926 Service Pack 1\n4.7.2\n"


def test_invalid_config_reports_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("shell = [", encoding="utf-8")

    with patch("dotnet_versions.core.global_config.global_config_path", return_value=config_path):
        result = CliRunner().invoke(cli, ["-b"])

    assert result.exit_code == 1
    assert "Error: Invalid config file" in result.output


def test_registry_snapshot_from_config(tmp_path: Path) -> None:
    snapshot = tmp_path / "registry.toml"
    snapshot.write_text(
        '[SOFTWARE.Microsoft."NET Framework Setup".NDP."v4".Full]\nRelease = 528040\n',
        encoding="utf-8",
    )
    config_path = tmp_path / "config.toml"
    config_path.write_text('registry_file = "registry.toml"\n', encoding="utf-8")

    with (
        patch("dotnet_versions.core.global_config.global_config_path", return_value=config_path),
        patch("dotnet_versions.core.context.RealShell", return_value=FakeShell()),
    ):
        result = CliRunner().invoke(cli, ["--b"])

    assert result.exit_code == 0
    assert result.output == "4.8\n"


def test_leading_double_dash_hides_batch_flag() -> None:
    """A leading "--" is the first argument, so "/b" after it is not a batch flag."""
    ctx = fake_context(registry_data=REGISTRY)

    result = invoke(ctx, ["--", "/b"])

    assert result.exit_code == 0
    assert result.output == "3.5.30729.4926 Service Pack 1\n4.7.2\n"
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 1


def test_leading_double_dash_hides_help_flag() -> None:
    ctx = fake_context(registry_data=REGISTRY, shell_output="8.0.100")

    result = invoke(ctx, ["--", "--help"])

    assert result.exit_code == 0
    assert result.output == "8.0.100\n3.5.30729.4926 Service Pack 1\n4.7.2\n"
    assert isinstance(ctx.shell, FakeShell)
    assert len(ctx.shell.script_calls) == 1
    assert isinstance(ctx.prompt, FakeUserPrompt)
    assert ctx.prompt.wait_count == 1
