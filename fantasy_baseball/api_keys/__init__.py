"""Service-to-service API keys: generation, storage, lifecycle, authentication."""

from fantasy_baseball.api_keys.dal import ApiKeyRepository
from fantasy_baseball.api_keys.models import ApiKeyClient, ApiKeyPublic, ApiKeyStatus
from fantasy_baseball.api_keys.service import ApiKeysService

__all__ = [
    "ApiKeyClient",
    "ApiKeyPublic",
    "ApiKeyRepository",
    "ApiKeyStatus",
    "ApiKeysService",
]
