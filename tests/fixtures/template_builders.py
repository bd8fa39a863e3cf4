"""Builders for CloudFormation template fragments and macro events used in tests."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from macro_shared.layers import DD_ACCOUNT_ID, DD_GOV_ACCOUNT_ID, LambdaFunction, RuntimeType


def build_function_resource(runtime: Optional[str], layers: Optional[List[Any]] = None) -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "Handler": "app.handler",
        "Role": "role-arn",
    }
    if runtime is not None:
        properties["Runtime"] = runtime
    if layers is not None:
        properties["Layers"] = layers
    return {"Type": "AWS::Lambda::Function", "Properties": properties}


def build_lambda_function(key: str, runtime: str, runtime_type: RuntimeType) -> LambdaFunction:
    return LambdaFunction(
        key=key,
        runtime=runtime,
        runtime_type=runtime_type,
        properties={
            "Handler": "app.handler",
            "Runtime": runtime,
            "Role": "role-arn",
        },
    )


def build_resources(functions: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Resources section with one Lambda function per (key, runtime) pair."""
    return {key: build_function_resource(runtime) for key, runtime in functions}


def build_macro_event(
    *,
    resources: Dict[str, Any],
    region: str = "us-east-1",
    params: Optional[Dict[str, Any]] = None,
    mappings: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Construct a CloudFormation macro invocation payload."""
    fragment: Dict[str, Any] = {"AWSTemplateFormatVersion": "2010-09-09", "Resources": resources}
    if mappings is not None:
        fragment["Mappings"] = mappings
    return {
        "region": region,
        "accountId": "123456789012",
        "fragment": fragment,
        "transformId": "123456789012::DatadogServerless",
        "params": params or {},
        "requestId": request_id or str(uuid4()),
        "templateParameterValues": {},
    }


def expected_layer_arn(region: str, layer_name: str, version: int) -> str:
    if region.startswith("us-gov-"):
        return f"arn:aws-us-gov:lambda:{region}:{DD_GOV_ACCOUNT_ID}:layer:{layer_name}:{version}"
    return f"arn:aws:lambda:{region}:{DD_ACCOUNT_ID}:layer:{layer_name}:{version}"
