"""DynamoDB configuration and initialization"""

import logging
import os
from typing import Optional
from content_tree.models.dynamodb_models import CategoryModel, ContentModel
from content_tree.core.config import settings

logger = logging.getLogger(__name__)

TABLE_MODELS = (CategoryModel, ContentModel)


class DynamoDBConfig:
    """Configuration for DynamoDB connection"""

    def __init__(
        self,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
    ):
        # Use settings from config.py as defaults, allow override via parameters
        self.region_name = region_name or settings.AWS_REGION
        self.endpoint_url = endpoint_url or settings.DYNAMODB_ENDPOINT_URL
        self.aws_access_key_id = aws_access_key_id or settings.AWS_ACCESS_KEY_ID
        self.aws_secret_access_key = (
            aws_secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        )

        # Override environment variables if explicitly provided
        if self.aws_access_key_id:
            os.environ["AWS_ACCESS_KEY_ID"] = self.aws_access_key_id
        if self.aws_secret_access_key:
            os.environ["AWS_SECRET_ACCESS_KEY"] = self.aws_secret_access_key
        if self.region_name:
            os.environ["AWS_DEFAULT_REGION"] = self.region_name

    def initialize_models(self):
        """Initialize DynamoDB models with configuration"""
        for model in TABLE_MODELS:
            # Clear any existing connection to force reinitialization
            model._connection = None
            model.Meta.region = self.region_name

            # Only set custom endpoint for local development
            if self.endpoint_url:
                model.Meta.host = self.endpoint_url

        if self.endpoint_url:
            logger.info("Using local DynamoDB endpoint: %s", self.endpoint_url)
        else:
            logger.info("Using AWS DynamoDB in region: %s", self.region_name)

    def create_tables(self):
        """Create DynamoDB tables if they don't exist"""
        self.initialize_models()

        for model in TABLE_MODELS:
            try:
                if not model.exists():
                    model.create_table(wait=True)
                    logger.info("Table %s created", model.Meta.table_name)
                else:
                    logger.info("Table %s already exists", model.Meta.table_name)
            except Exception:
                logger.exception("Error creating table %s", model.Meta.table_name)
                raise

    def delete_tables(self):
        """Delete DynamoDB tables (useful for testing)"""
        for model in TABLE_MODELS:
            try:
                if model.exists():
                    model.delete_table()
                    logger.info("Table %s deleted", model.Meta.table_name)
            except Exception:
                logger.exception("Error deleting table %s", model.Meta.table_name)
                raise


# Global configuration instance
dynamodb_config = DynamoDBConfig()
