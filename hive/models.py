"""
Directive models for Hive bundles.

The directive describes how the Runnables in a bundle are orchestrated. The bundle
codec treats it as an opaque document and only relies on marshal()/unmarshal().
"""

from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hive.bundle.errors import DirectiveError


class Handler(BaseModel):
    """Maps an input (request, stream, ...) to a sequence of Runnable steps"""

    model_config = ConfigDict(extra="allow")

    type: str = "request"
    resource: str
    method: Optional[str] = None
    steps: List[Dict[str, Any]] = Field(default_factory=list)


class Schedule(BaseModel):
    """Runs a sequence of steps on a timer"""

    model_config = ConfigDict(extra="allow")

    name: str
    every: Dict[str, int] = Field(default_factory=dict)
    steps: List[Dict[str, Any]] = Field(default_factory=list)


class Directive(BaseModel):
    """Declarative description of a Runnable application"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    identifier: str
    app_version: str = Field(default="v0.0.1", alias="appVersion")
    atmo_version: Optional[str] = Field(default=None, alias="atmoVersion")
    handlers: List[Handler] = Field(default_factory=list)
    schedules: List[Schedule] = Field(default_factory=list)

    def marshal(self) -> bytes:
        """Serialize the directive to YAML bytes."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return yaml.safe_dump(data, sort_keys=False).encode("utf-8")

    @classmethod
    def unmarshal(cls, data: bytes) -> "Directive":
        """Parse YAML bytes into a Directive.

        Raises:
            DirectiveError: if the bytes are not valid YAML or do not describe a directive
        """
        try:
            raw = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise DirectiveError(f"invalid directive YAML: {e}") from e

        if not isinstance(raw, dict):
            raise DirectiveError(f"directive must be a mapping, got {type(raw).__name__}")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise DirectiveError(f"invalid directive: {e}") from e
