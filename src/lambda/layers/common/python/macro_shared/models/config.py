"""Macro configuration read from transform parameters or template mappings.

Parameters can be given directly on the transform::

    Transform:
      - Name: DatadogServerless
        Parameters:
          nodeLayerVersion: 25

or, when the transform has none, under ``Mappings.Datadog.Parameters`` of the
template being processed. Layer versions have no defaults: leaving one out
is how a template opts out of a runtime family, and the applicator reports it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

DATADOG_MAPPING_KEY = "Datadog"
PARAMETERS_KEY = "Parameters"


class ConfigurationError(ValueError):
    """Raised when macro parameters cannot be parsed."""


class MacroConfiguration(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    add_layers: bool = Field(default=True, alias="addLayers")
    python_layer_version: Optional[PositiveInt] = Field(default=None, alias="pythonLayerVersion")
    node_layer_version: Optional[PositiveInt] = Field(default=None, alias="nodeLayerVersion")

    @field_validator("python_layer_version", "node_layer_version", mode="before")
    @classmethod
    def _reject_bool_versions(cls, v: Any) -> Any:  # type: ignore[override]
        if isinstance(v, bool):
            raise ValueError("layer version must be a positive integer")
        if isinstance(v, str):
            return v.strip()
        return v


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "parameters"
        parts.append(f"{loc}: {err.get('msg')}")
    return "Invalid Datadog macro parameters - " + "; ".join(parts)


def _parse(values: Mapping[str, Any]) -> MacroConfiguration:
    try:
        return MacroConfiguration.model_validate(dict(values))
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


def config_from_params(params: Mapping[str, Any]) -> MacroConfiguration:
    return _parse(params)


def config_from_mappings(mappings: Optional[Mapping[str, Any]]) -> MacroConfiguration:
    """Read the ``Datadog.Parameters`` block from a template ``Mappings`` section."""
    datadog = (mappings or {}).get(DATADOG_MAPPING_KEY)
    if not isinstance(datadog, Mapping):
        return MacroConfiguration()
    params = datadog.get(PARAMETERS_KEY)
    if not isinstance(params, Mapping):
        return MacroConfiguration()
    return _parse(params)


def load_configuration(
    params: Optional[Mapping[str, Any]],
    mappings: Optional[Mapping[str, Any]] = None,
) -> MacroConfiguration:
    """Transform parameters win outright; template mappings are only a fallback."""
    if params:
        return config_from_params(params)
    return config_from_mappings(mappings)
