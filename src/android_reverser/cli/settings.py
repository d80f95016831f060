"""Validated command-line settings."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


def ensure_writable_directory(directory: Path) -> Path:
    """Return *directory* if it is a writable directory, creating it and its parents if missing."""
    if directory.exists():
        if not directory.is_dir() or not os.access(directory, os.W_OK):
            raise ValueError(f"{directory} is not a writeable directory")
        return directory
    try:
        directory.mkdir(parents=True)
    except OSError:
        raise ValueError(f"Failed to create directory at {directory}") from None
    return directory


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Path
    package: str

    @field_validator("source")
    @classmethod
    def _check_source(cls, value: Path) -> Path:
        return ensure_writable_directory(value)

    @field_validator("package")
    @classmethod
    def _check_package(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Package name must not be blank")
        return value


def first_error_message(exc: ValidationError) -> str:
    message = str(exc.errors()[0]["msg"])
    return message.removeprefix("Value error, ")
