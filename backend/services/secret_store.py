"""
AWS Secrets Manager lookup for the Google Places API key.

The secret is a JSON object stored as SecretString:
    {"GOOGLE_API_KEY": "..."}

The key is read again on every cache miss, so a rotated secret is picked
up the next time the place data is refreshed.
"""

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from config import settings
from errors import CredentialError

logger = logging.getLogger(__name__)

API_KEY_FIELD = "GOOGLE_API_KEY"

_client = None


def _get_client():
    """Return cached Secrets Manager client, creating on first call."""
    global _client
    if _client is None:
        _client = boto3.client("secretsmanager", region_name=settings.aws_region)
    return _client


def get_google_api_key(secret_name: str, client=None) -> str:
    """Read the Google API key from the named secret."""
    client = client or _get_client()

    try:
        res = client.get_secret_value(SecretId=secret_name)
    except (BotoCoreError, ClientError) as e:
        raise CredentialError(f"Could not read secret {secret_name}: {e}") from e

    secret_string = res.get("SecretString")
    if not secret_string:
        raise CredentialError(f"Missing {API_KEY_FIELD} in secret")

    try:
        secret = json.loads(secret_string)
    except json.JSONDecodeError as e:
        raise CredentialError(f"Secret {secret_name} is not valid JSON") from e

    key = secret.get(API_KEY_FIELD) if isinstance(secret, dict) else None
    if not key:
        raise CredentialError(f"Missing {API_KEY_FIELD} in secret")
    return key
