"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables read by the
catalog Lambda handler, validated through aws-lambda-env-modeler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, ConfigDict, Field


class CatalogHandlerEnvVars(BaseModel):
    """Environment variables for the catalog Lambda handler."""

    model_config = ConfigDict(frozen=True)

    # DynamoDB table holding products
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for product storage',
        min_length=1
    )]

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # Only set for local testing (DynamoDB Local, LocalStack)
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='Custom DynamoDB endpoint URL'
    )] = None

    ENVIRONMENT: Annotated[str, Field(
        default='dev',
        description='Deployment environment name',
        pattern=r'^(dev|test|staging|prod)$'
    )] = 'dev'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='product-catalog',
        description='Service name for AWS Powertools'
    )] = 'product-catalog'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='ProductCatalog',
        description='Namespace for CloudWatch metrics'
    )] = 'ProductCatalog'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        default='false',
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'


def get_handler_env_vars() -> CatalogHandlerEnvVars:
    """
    Get typed environment variables for the catalog handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=CatalogHandlerEnvVars)
