"""Production environment configuration."""

import os

from infrastructure.config.types import EnvironmentConfig

prod_config: EnvironmentConfig = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
    "macro_name": "DatadogServerless",
    "macro_description": "Adds Datadog Lambda Library layers to Lambda functions",
    "lambda_memory": 512,
    "lambda_timeout": 60,
    "log_retention_days": 90,
    "log_level": "INFO",
    "removal_policy": "retain",
    "tags": {
        "Environment": "prod",
        "Project": "ServerlessLayerMacro",
        "Owner": "PlatformTeam",
        "CostCenter": "Engineering",
    },
}
