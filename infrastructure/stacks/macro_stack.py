"""Serverless macro stack: Lambda function + CloudFormation macro registration."""

from __future__ import annotations

from pathlib import Path

from aws_cdk import (
    CfnMacro,
    CfnOutput,
    Duration,
    RemovalPolicy,
    Stack,
    aws_lambda as lambda_,
    aws_logs as logs,
)
from aws_cdk.aws_lambda_python_alpha import BundlingOptions, PythonFunction, PythonLayerVersion
from constructs import Construct

from infrastructure.config.types import EnvironmentConfig

_REPO_ROOT = Path(__file__).resolve().parents[2]
_COMMON_LAYER_ENTRY = _REPO_ROOT / "src" / "lambda" / "layers" / "common"
_MACRO_FUNCTION_ENTRY = _REPO_ROOT / "src" / "lambda" / "functions" / "serverless_macro"

DEFAULT_MACRO_NAME = "DatadogServerless"


class ServerlessMacroStack(Stack):
    """Deploy the layer-injection macro so templates can declare it as a Transform."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        config: EnvironmentConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = environment
        self.config = config
        self.macro_name = str(self.config.get("macro_name", DEFAULT_MACRO_NAME) or "").strip()
        if not self.macro_name:
            raise ValueError("macro_name must be a non-empty string")

        self.common_layer = self._create_common_layer()
        self.log_group = self._create_log_group()
        self.macro_function = self._create_macro_function()
        self.macro = self._create_macro()
        self._create_outputs()

    def _create_common_layer(self) -> lambda_.LayerVersion:
        """Create Common Layer with the macro_shared package and pydantic.

        Uses standard Python layer layout: python/macro_shared/... at the root of asset.
        """
        return PythonLayerVersion(
            self,
            "CommonLayer",
            entry=str(_COMMON_LAYER_ENTRY),
            layer_version_name=f"{self.env_name}-serverless-macro-common-layer",
            description="Layer resolution logic and models for the serverless macro",
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_12],
            bundling=BundlingOptions(
                command=[
                    "bash",
                    "-c",
                    "set -euxo pipefail; "
                    "mkdir -p /asset-output/python; "
                    "cp -R /asset-input/python/. /asset-output/python/; "
                    "if [ -f requirements.txt ]; then pip install -q -r requirements.txt -t /asset-output/python; fi",
                ],
                asset_excludes=["tests", "__pycache__", "*.pyc"],
            ),
        )

    def _create_log_group(self) -> logs.LogGroup:
        return logs.LogGroup(
            self,
            "MacroFunctionLogGroup",
            log_group_name=f"/aws/lambda/{self.env_name}-serverless-macro",
            retention=self._log_retention(),
            removal_policy=self._removal_policy(),
        )

    def _create_macro_function(self) -> PythonFunction:
        return PythonFunction(
            self,
            "MacroFunction",
            function_name=f"{self.env_name}-serverless-macro",
            runtime=lambda_.Runtime.PYTHON_3_12,
            entry=str(_MACRO_FUNCTION_ENTRY),
            index="handler.py",
            handler="main",
            memory_size=int(self.config.get("lambda_memory", 256)),
            timeout=Duration.seconds(int(self.config.get("lambda_timeout", 30))),
            log_group=self.log_group,
            environment={
                "ENVIRONMENT": self.env_name,
                "LOG_LEVEL": str(self.config.get("log_level", "INFO")).upper(),
            },
            layers=[self.common_layer],
        )

    def _create_macro(self) -> CfnMacro:
        return CfnMacro(
            self,
            "Macro",
            name=self.macro_name,
            function_name=self.macro_function.function_arn,
            description=str(
                self.config.get("macro_description", "Adds Datadog Lambda Library layers to Lambda functions")
            ),
        )

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "MacroName",
            value=self.macro_name,
            description="Name to reference in a template Transform section",
        )
        CfnOutput(
            self,
            "MacroFunctionArn",
            value=self.macro_function.function_arn,
            description="ARN of the Lambda function backing the macro",
        )

    def _removal_policy(self) -> RemovalPolicy:
        if str(self.config.get("removal_policy", "retain")).lower() == "destroy":
            return RemovalPolicy.DESTROY
        return RemovalPolicy.RETAIN

    def _log_retention(self) -> logs.RetentionDays:
        retention_map = {
            1: logs.RetentionDays.ONE_DAY,
            3: logs.RetentionDays.THREE_DAYS,
            5: logs.RetentionDays.FIVE_DAYS,
            7: logs.RetentionDays.ONE_WEEK,
            14: logs.RetentionDays.TWO_WEEKS,
            30: logs.RetentionDays.ONE_MONTH,
            90: logs.RetentionDays.THREE_MONTHS,
        }
        return retention_map.get(self.config.get("log_retention_days", 14), logs.RetentionDays.TWO_WEEKS)
