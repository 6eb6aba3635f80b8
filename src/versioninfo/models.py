"""Data models for versioninfo."""

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from versioninfo.config import settings
from versioninfo.logging import logger

U32_MAX = 2**32 - 1

# Unsigned decimal as accepted by a u32 parse: optional '+', ASCII digits only
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

U32 = Annotated[int, Field(ge=0, le=U32_MAX, strict=True)]


def _parse_u32(token: str) -> int | None:
    """Parse a single version component, returning None if it isn't a u32."""
    if not _UNSIGNED_RE.fullmatch(token):
        return None
    value = int(token)
    if value > U32_MAX:
        return None
    return value


class Version(BaseModel):
    """
    🏷️ A tool release version made of major, minor and patch numbers.

    Versions compare for equality only; there is no ordering between them.
    Besides the usual dotted form, a version can be rendered in the two
    encodings used when naming installable tool components.
    """

    model_config = ConfigDict(frozen=True)

    major: U32 = Field(..., description="Major release number")
    minor: U32 = Field(..., description="Minor release number")
    patch: U32 = Field(..., description="Patch release number")

    @classmethod
    def new(cls, major: int, minor: int, patch: int) -> "Version":
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def from_env_var(cls) -> "Version | None":
        """
        Build a Version from the CFG_VERSION setting.

        Returns:
            The parsed Version, or None when CFG_VERSION is unset or malformed.
        """
        if settings.cfg_version is None:
            return None
        return cls.from_string(settings.cfg_version)

    @classmethod
    def from_string(cls, version_str: str) -> "Version | None":
        """
        Parse a "major.minor.patch" string.

        The string is split on every '.', and the first three pieces must each
        be an unsigned 32-bit integer. Anything after the third piece is
        ignored, so "1.2.3.4" parses as 1.2.3.

        Args:
            version_str: Text to parse (e.g., "1.22.0")

        Returns:
            The parsed Version, or None if fewer than three pieces are present
            or any of the first three is not a valid number.

        Examples:
            "3.2.1" -> Version(3, 2, 1)
            "0.0" -> None
            "0.0.a" -> None
        """
        nums = iter(version_str.split("."))
        parts = []
        for _ in range(3):
            token = next(nums, None)
            value = None if token is None else _parse_u32(token)
            if value is None:
                logger.debug(
                    "Rejected version string {version_str!r}", version_str=version_str
                )
                return None
            parts.append(value)

        return cls.new(*parts)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_unstable_tool_string(self) -> str:
        """Render as "0.{major}{minor}.{patch}", e.g. 1.2.3 -> "0.12.3"."""
        return f"0.{self.major}{self.minor}.{self.patch}"

    def to_stable_tool_string(self) -> str:
        """Render as "{major}{minor}.{patch}.0", e.g. 1.2.3 -> "12.3.0"."""
        return f"{self.major}{self.minor}.{self.patch}.0"


CURRENT_STABLE = Version.new(1, 20, 0)
CURRENT_BETA = Version.new(1, 21, 0)
CURRENT_NIGHTLY = Version.new(1, 22, 0)

STABLE = CURRENT_STABLE
BETA = CURRENT_BETA
NIGHTLY = CURRENT_NIGHTLY
