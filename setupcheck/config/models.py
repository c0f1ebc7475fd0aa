"""
Pydantic models for configuration validation.

Defines the setup requirements the checks compare against.
"""

import re

from pydantic import BaseModel, Field, field_validator

VERSION_PATTERN = re.compile(r"^\d+\.\d+(\..*)?$")


class VerifierConfig(BaseModel):
    """Requirements for a ready developer machine."""

    required_shell: str = Field(default="zsh", min_length=1, description="Shell name $SHELL must contain")
    required_git_version: str = Field(default="2.0", description="Minimum MAJOR.MINOR git version")
    editor_pattern: str = Field(default="code", min_length=1, description="Text core.editor must contain")
    editor_name: str = Field(default="VS Code", min_length=1, description="Editor name shown in reports")
    emails_url: str = Field(
        default="https://github.com/settings/emails",
        min_length=1,
        description="Account page listing registered emails",
    )
    git_command: str = Field(default="git", min_length=1, description="git executable")

    @field_validator("required_git_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        v = v.strip()
        if not VERSION_PATTERN.match(v):
            raise ValueError(f"Invalid version: {v!r} (expected MAJOR.MINOR)")
        return v
