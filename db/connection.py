import boto3

from settings import AppConfig

_client = None


def get_dynamodb_client():
    """
    Return a boto3 DynamoDB client, created once per process so warm Lambda
    containers reuse the connection pool.
    Configuration (see settings.AppConfig):
      - aws_region
      - dynamodb_endpoint_url (optional, for DynamoDB Local)
    """
    global _client
    if _client is None:
        _client = boto3.client(
            "dynamodb",
            region_name=AppConfig.get_value("aws_region"),
            endpoint_url=AppConfig.get_value("dynamodb_endpoint_url"),
        )
    return _client


def reset_client():
    global _client
    _client = None
