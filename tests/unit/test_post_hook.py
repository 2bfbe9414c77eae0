"""Unit tests for the post-processing command runner."""

import shlex
import sys

import pytest

from leetcode_daily.domain.exceptions import PostHookError
from leetcode_daily.infrastructure.post_hook import PostHookRunner

PYTHON = shlex.quote(sys.executable)


def test_build_command_substitutes_slug():
    runner = PostHookRunner("bun run problems {slug} all")

    assert runner.build_command("two-sum") == ["bun", "run", "problems", "two-sum", "all"]


def test_enabled_only_with_command():
    assert PostHookRunner("bun run problems {slug}").enabled
    assert not PostHookRunner("   ").enabled


@pytest.mark.asyncio
async def test_run_success_receives_slug():
    script = "import sys; sys.exit(0 if sys.argv[1] == 'two-sum' else 5)"
    runner = PostHookRunner(f"{PYTHON} -c {shlex.quote(script)} {{slug}}")

    await runner.run("two-sum")


@pytest.mark.asyncio
async def test_non_zero_exit_raises_with_output():
    script = "import sys; print('bad things'); sys.exit(3)"
    runner = PostHookRunner(f"{PYTHON} -c {shlex.quote(script)}", silent=True)

    with pytest.raises(PostHookError) as exc_info:
        await runner.run("two-sum")

    assert exc_info.value.returncode == 3
    assert "bad things" in exc_info.value.output


@pytest.mark.asyncio
async def test_missing_executable_raises():
    runner = PostHookRunner("definitely-not-a-real-binary-xyz {slug}")

    with pytest.raises(PostHookError) as exc_info:
        await runner.run("two-sum")

    assert exc_info.value.returncode is None
