"""DynamoDB models using PynamoDB ORM"""

from datetime import datetime
from pynamodb.models import Model
from pynamodb.attributes import (
    BooleanAttribute,
    ListAttribute,
    UnicodeAttribute,
    UTCDateTimeAttribute,
)
from pynamodb.indexes import GlobalSecondaryIndex, AllProjection
from content_tree.core.config import settings


class ParentIdIndex(GlobalSecondaryIndex):
    """Global Secondary Index for searching categories by parent_id"""

    class Meta:
        index_name = "parent-id-index"
        read_capacity_units = 5
        write_capacity_units = 5
        projection = AllProjection()

    parent_id = UnicodeAttribute(hash_key=True)


class CategoryIdIndex(GlobalSecondaryIndex):
    """Global Secondary Index for searching content items by category_id"""

    class Meta:
        index_name = "category-id-index"
        read_capacity_units = 5
        write_capacity_units = 5
        projection = AllProjection()

    category_id = UnicodeAttribute(hash_key=True)


class CategoryModel(Model):
    """DynamoDB model for categories using PynamoDB ORM"""

    class Meta:
        table_name = f"{settings.DYNAMODB_TABLE_PREFIX}categories"
        region = settings.AWS_REGION
        billing_mode = "PAY_PER_REQUEST"  # On-demand billing

    # Primary key
    id = UnicodeAttribute(hash_key=True)

    # Attributes; root categories carry no parent_id so they stay out of the index
    name = UnicodeAttribute()
    parent_id = UnicodeAttribute(null=True)
    image = UnicodeAttribute(default="")
    keywords = ListAttribute(of=UnicodeAttribute, default=list)
    enabled = BooleanAttribute(default=True)
    created_at = UTCDateTimeAttribute(default=datetime.utcnow)
    updated_at = UTCDateTimeAttribute(default=datetime.utcnow)

    # Global Secondary Index
    parent_id_index = ParentIdIndex()


class ContentModel(Model):
    """DynamoDB model for content items using PynamoDB ORM"""

    class Meta:
        table_name = f"{settings.DYNAMODB_TABLE_PREFIX}contents"
        region = settings.AWS_REGION
        billing_mode = "PAY_PER_REQUEST"

    id = UnicodeAttribute(hash_key=True)

    name = UnicodeAttribute()
    category_id = UnicodeAttribute(null=True)
    image = UnicodeAttribute(default="")
    keywords = ListAttribute(of=UnicodeAttribute, default=list)
    enabled = BooleanAttribute(default=True)
    checklist = ListAttribute(of=UnicodeAttribute, default=list)
    description = UnicodeAttribute(default="")
    video = UnicodeAttribute(default="")
    created_at = UTCDateTimeAttribute(default=datetime.utcnow)
    updated_at = UTCDateTimeAttribute(default=datetime.utcnow)

    category_id_index = CategoryIdIndex()
