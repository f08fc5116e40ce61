"""Section models for ``zenkaku.toml``.

Every field has a default, so a file only lists what it changes and an
empty file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from zenkaku.domain.schemes import Scheme


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = ConfigDict(frozen=True)

    default_scheme: str = "fullwidth"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True


class SchemeConfig(BaseModel):
    """One ``[[schemes]]`` entry: a user-defined digit scheme."""

    model_config = ConfigDict(frozen=True)

    name: str
    glyphs: list[str]
    description: str = ""

    @field_validator("glyphs")
    @classmethod
    def _ten_glyphs(cls, value: list[str]) -> list[str]:
        if len(value) != 10:
            msg = f"expected 10 glyphs (one per digit), got {len(value)}"
            raise ValueError(msg)
        return value

    def to_scheme(self) -> Scheme:
        """Build the domain :class:`Scheme` (re-validates the bijection)."""
        return Scheme(name=self.name, glyphs=tuple(self.glyphs), description=self.description)
