"""
DynamoDB implementation of the catalog capabilities.

The query and command sides share one table keyed by ``id`` but are exposed as
separate classes so each side can be substituted independently.
"""

from typing import Any, Dict, List, Optional
from uuid import uuid4

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import ClientError

from catalog.dal import DeleteOutcome
from catalog.handlers.models.env_vars import get_handler_env_vars
from catalog.handlers.utils.errors import ProductNotFoundError
from catalog.handlers.utils.observability import logger, metrics, tracer
from catalog.models.input import CreateProductModel, UpdateProductModel
from catalog.models.product import Product


class BaseDynamoDbHandler:
    """Shared table setup for the DynamoDB capabilities."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name

        session_config: Dict[str, Any] = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    @classmethod
    def from_environment(cls):
        """Build a handler from the validated Lambda environment."""
        env_vars = get_handler_env_vars()
        return cls(
            table_name=env_vars.TABLE_NAME,
            region_name=env_vars.AWS_REGION,
            endpoint_url=env_vars.DYNAMODB_ENDPOINT,
        )

    def _log_client_error(self, operation: str, error: ClientError, product_id: Optional[str] = None) -> None:
        error_code = error.response['Error']['Code']
        metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
        logger.error(f"DynamoDB {operation} error", extra={
            "error_code": error_code,
            "error_message": error.response['Error'].get('Message'),
            "table_name": self.table_name,
            "product_id": product_id,
        })


class DynamoDbQueries(BaseDynamoDbHandler):
    """Read side backed by DynamoDB."""

    @tracer.capture_method
    def all_products(self) -> List[Product]:
        """
        Scan the whole table.

        Returns:
            Every stored product, following scan pagination to the end

        Raises:
            ClientError: If DynamoDB operation fails
        """
        products: List[Product] = []
        scan_kwargs: Dict[str, Any] = {}

        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                products.extend(Product.model_validate(item) for item in response.get('Items', []))

                last_evaluated_key = response.get('LastEvaluatedKey')
                if not last_evaluated_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_evaluated_key
        except ClientError as e:
            self._log_client_error("Scan", e)
            raise

        logger.debug("Products scanned", extra={"product_count": len(products)})
        return products

    @tracer.capture_method
    def product_by_id(self, product_id: str) -> Product:
        """
        Retrieve a product by its ID.

        Args:
            product_id: Unique identifier of the product

        Returns:
            The stored product

        Raises:
            ProductNotFoundError: If no item has this id
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.get_item(Key={'id': product_id})
        except ClientError as e:
            self._log_client_error("GetItem", e, product_id)
            raise

        item = response.get('Item')
        if not item:
            logger.info(f'Product not found: {product_id}')
            raise ProductNotFoundError(product_id)

        tracer.put_annotation('product_retrieved', product_id)
        return Product.model_validate(item)


class DynamoDbCommands(BaseDynamoDbHandler):
    """Write side backed by DynamoDB."""

    @tracer.capture_method
    def create_product(self, payload: CreateProductModel) -> Product:
        """
        Store a new product under a generated id.

        Args:
            payload: Decoded create request

        Returns:
            The created product

        Raises:
            ClientError: If DynamoDB operation fails
        """
        product = Product(id=str(uuid4()), **payload.model_dump())

        try:
            self.table.put_item(
                Item=product.model_dump(),
                ConditionExpression='attribute_not_exists(#id)',
                ExpressionAttributeNames={'#id': 'id'},
            )
        except ClientError as e:
            self._log_client_error("PutItem", e, product.id)
            raise

        logger.info(f'Successfully created product in database: {product.id}')
        tracer.put_annotation('product_created', product.id)
        return product

    @tracer.capture_method
    def update_product(self, product_id: str, payload: UpdateProductModel) -> Product:
        """
        Replace the attributes of an existing product.

        Args:
            product_id: Unique identifier of the product
            payload: Decoded update request

        Returns:
            The product as stored after the update

        Raises:
            ProductNotFoundError: If no item has this id
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.update_item(
                Key={'id': product_id},
                UpdateExpression='SET #name = :name, #description = :description',
                ConditionExpression='attribute_exists(#id)',
                ExpressionAttributeNames={
                    '#id': 'id',
                    '#name': 'name',
                    '#description': 'description',
                },
                ExpressionAttributeValues={
                    ':name': payload.name,
                    ':description': payload.description,
                },
                ReturnValues='ALL_NEW',
            )
        except ClientError as e:
            if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                logger.info(f'Product not found for update: {product_id}')
                raise ProductNotFoundError(product_id) from e
            self._log_client_error("UpdateItem", e, product_id)
            raise

        tracer.put_annotation('product_updated', product_id)
        return Product.model_validate(response['Attributes'])

    @tracer.capture_method
    def delete_product_by_id(self, product_id: str) -> DeleteOutcome:
        """
        Delete a product by its ID.

        Args:
            product_id: Unique identifier of the product

        Returns:
            DELETED if an item was removed, NOT_FOUND otherwise

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.delete_item(
                Key={'id': product_id},
                ReturnValues='ALL_OLD',
            )
        except ClientError as e:
            self._log_client_error("DeleteItem", e, product_id)
            raise

        if response.get('Attributes'):
            logger.info(f'Product deleted: {product_id}')
            return DeleteOutcome.DELETED

        logger.info(f'Product not found for deletion: {product_id}')
        return DeleteOutcome.NOT_FOUND
