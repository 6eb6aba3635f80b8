"""Version information for tool releases."""

from versioninfo.config import settings
from versioninfo.logging import logger
from versioninfo.models import Version
from versioninfo.process import ProcessRunner, default_runner

COMMIT_HASH_ARGS = ("rev-parse", "--short", "HEAD")
COMMIT_DATE_ARGS = ("log", "-1", "--date=short", "--pretty=format:%cd")


def channel() -> str | None:
    """Get the release channel from the CFG_RELEASE_CHANNEL setting.

    Returns:
        Channel label (e.g., 'nightly'), or None if not set.
    """
    return settings.cfg_release_channel


def _git_output(args: tuple[str, ...], runner: ProcessRunner | None) -> str | None:
    runner = runner or default_runner
    stdout = runner.run(settings.git_executable, args)
    if stdout is None:
        return None
    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("git {command} produced non-UTF-8 output", command=args[0])
        return None


def commit_hash(runner: ProcessRunner | None = None) -> str | None:
    """Get the abbreviated hash of the current git commit.

    Args:
        runner: Process runner to use instead of spawning git directly.

    Returns:
        Raw output of `git rev-parse --short HEAD` (trailing newline
        included), or None if git couldn't be run or its output isn't text.
    """
    return _git_output(COMMIT_HASH_ARGS, runner)


def commit_date(runner: ProcessRunner | None = None) -> str | None:
    """Get the date of the last git commit as YYYY-MM-DD.

    Args:
        runner: Process runner to use instead of spawning git directly.

    Returns:
        Raw output of `git log -1 --date=short --pretty=format:%cd`, or None
        if git couldn't be run or its output isn't text.
    """
    return _git_output(COMMIT_DATE_ARGS, runner)


def get_version_info(runner: ProcessRunner | None = None) -> str:
    """Get formatted version information for logging.

    Returns:
        Formatted string with version, channel, commit hash and commit date.
    """
    version = Version.from_env_var()
    commit = (commit_hash(runner) or "").strip()
    date = (commit_date(runner) or "").strip()
    return (
        f"version={version or 'unknown'}, "
        f"channel={channel() or 'unknown'}, "
        f"commit={commit or 'unknown'}, "
        f"date={date or 'unknown'}"
    )
