from shortlinks.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlinks.dao.dynamodb.short_link_dynamodb_dao import ShortLinkDynamoDBDAO


__all__ = [
    'DynamoDBTableMixin',
    'ShortLinkDynamoDBDAO',
]
