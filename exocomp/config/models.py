"""Pydantic models for configuration validation."""

import re

from pydantic import BaseModel, Field, field_validator


class SitelinkPropertySyncConfig(BaseModel):
    """Settings of the sitelink-property-sync module."""

    enabled: bool = Field(True, description="Whether the module may run")
    property: str = Field("P42", description="Property kept in sync with the sitelink (P123)")
    sitelink: str = Field("wikidata", description="Site key of the sitelink")
    dry_run: bool = Field(False, description="Default dry-run mode, --dry-run also enables it")
    limit: int = Field(500, gt=0, description="Maximum number of items to check per run")
    namespace: int = Field(0, description="Namespace holding the items")
    summary: str = Field("Updated via Exocomp", description="Edit summary for writes")

    @field_validator("property")
    @classmethod
    def _check_property_id(cls, value: str) -> str:
        value = value.strip().upper()
        if not re.fullmatch(r"P[1-9]\d*", value):
            raise ValueError(f"Not a property id: '{value}'")
        return value


class ProjectConfig(BaseModel):
    """Main project configuration."""

    name: str = Field("exocomp", description="Project name")
    description: str | None = Field(None, description="Project description")

    modules: dict[str, SitelinkPropertySyncConfig] = Field(
        default_factory=dict, description="Module configurations by module name"
    )
