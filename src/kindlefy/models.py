"""Pydantic models for the Kindle compatibility linter."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileCategory(str, Enum):
    SCRIPT = "script"
    TYPED_SCRIPT = "typed_script"
    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    UNSUPPORTED = "unsupported"


class Advisory(BaseModel):
    """A single compatibility warning produced by a rule scanner."""

    model_config = ConfigDict(frozen=True)

    rule: str = Field(description="Identifier of the rule that fired (e.g., 'fetch_api')")
    message: str = Field(min_length=1, description="Human-readable description of the problem and the fix")


class FileReport(BaseModel):
    """Advisories for one scanned file."""

    path: str = Field(description="File path as discovered by the walker")
    category: FileCategory
    advisories: list[Advisory] = Field(default_factory=list)


class CompatibilityEntry(BaseModel):
    """Known web engine baseline for a Kindle device or firmware."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Device or firmware identifier")
    engine_version: str = Field(description="WebKit version string or range")
    notes: str = Field(description="Known limitations")


class ScanRequest(BaseModel):
    """Input for the sandbox entrypoint."""

    path: str = Field(description="File or directory to scan")


class ScanResult(BaseModel):
    """Structured result of a full scan."""

    target: str
    files_scanned: int = Field(description="Number of files dispatched to a scanner")
    reports: list[FileReport] = Field(
        default_factory=list, description="Files with at least one advisory"
    )
