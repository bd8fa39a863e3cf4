"""CloudFormation macro request/response models using Pydantic v2.

CloudFormation invokes the macro function with::

    {
      "region": "us-east-1",
      "accountId": "123456789012",
      "fragment": {...},
      "transformId": "123456789012::DatadogServerless",
      "params": {...},
      "requestId": "...",
      "templateParameterValues": {...}
    }

and expects ``requestId``, ``status`` and ``fragment`` back, plus
``errorMessage`` when the status is not ``success``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


class MacroEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    region: str
    account_id: Optional[str] = Field(default=None, alias="accountId")
    fragment: Dict[str, Any]
    transform_id: Optional[str] = Field(default=None, alias="transformId")
    params: Dict[str, Any] = Field(default_factory=dict)
    request_id: str = Field(alias="requestId")
    template_parameter_values: Dict[str, Any] = Field(default_factory=dict, alias="templateParameterValues")

    @field_validator("params", "template_parameter_values", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:  # type: ignore[override]
        return {} if v is None else v

    @property
    def resources(self) -> Dict[str, Any]:
        resources = self.fragment.get("Resources")
        return resources if isinstance(resources, dict) else {}

    @property
    def mappings(self) -> Optional[Dict[str, Any]]:
        mappings = self.fragment.get("Mappings")
        return mappings if isinstance(mappings, dict) else None


class MacroResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    request_id: Optional[str] = Field(default=None, alias="requestId")
    status: str
    fragment: Dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = Field(default=None, alias="errorMessage")

    @classmethod
    def success(cls, request_id: Optional[str], fragment: Dict[str, Any]) -> "MacroResponse":
        return cls(request_id=request_id, status=STATUS_SUCCESS, fragment=fragment)

    @classmethod
    def failure(cls, request_id: Optional[str], fragment: Dict[str, Any], message: str) -> "MacroResponse":
        return cls(request_id=request_id, status=STATUS_FAILURE, fragment=fragment, error_message=message)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
