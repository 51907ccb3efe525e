"""AWS backed secret store providers."""
from .client import SecretsManagerClient
from .secretsmanager import SecretsManager, new
from .session import new_session

__all__ = ["SecretsManager", "SecretsManagerClient", "new", "new_session"]
