"""Static cloud and resource tables used to resolve token audiences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Environment(str, Enum):
    """Supported Azure clouds."""

    AZURE = "azure"
    AZURE_US_GOVERNMENT = "azureUSGovernment"
    AZURE_GERMANY = "azureGermany"
    AZURE_CHINA = "azureChina"


class ResourceType(str, Enum):
    """Predefined resource types that map to a token audience."""

    DEFAULT = "default"
    ARM = "arm"
    RM = "rm"
    KEYVAULT = "keyvault"
    VAULT = "vault"
    DATALAKE = "datalake"
    DATABASE = "database"
    AZURESQL = "azuresql"
    EVENTHUBS = "eventhubs"
    SERVICEBUS = "servicebus"
    STORAGE = "storage"


@dataclass(frozen=True)
class CloudEndpoints:
    """Authority and resource audiences of a single cloud."""

    active_directory_authority: str
    resources: Mapping[ResourceType, str]


MSI_API_VERSION: Final[str] = "2017-09-01"
CLIENT_CREDENTIALS_GRANT: Final[str] = "client_credentials"
FORM_CONTENT_TYPE: Final[str] = "application/x-www-form-urlencoded"


def _cloud(authority: str, resources: dict[ResourceType, str]) -> CloudEndpoints:
    return CloudEndpoints(
        active_directory_authority=authority,
        resources=MappingProxyType(resources),
    )


_AZURE = _cloud(
    "https://login.microsoftonline.com",
    {
        ResourceType.DEFAULT: "https://management.core.windows.net/",
        ResourceType.ARM: "https://management.core.windows.net/",
        ResourceType.RM: "https://management.core.windows.net/",
        ResourceType.KEYVAULT: "https://vault.azure.net",
        ResourceType.VAULT: "https://vault.azure.net",
        ResourceType.DATALAKE: "https://datalake.azure.net/",
        ResourceType.DATABASE: "https://database.windows.net/",
        ResourceType.AZURESQL: "https://database.windows.net/",
        ResourceType.EVENTHUBS: "https://eventhubs.azure.net",
        ResourceType.SERVICEBUS: "https://servicebus.azure.net",
        ResourceType.STORAGE: "https://storage.azure.com/",
    },
)

# Data Lake Store is only offered in the public cloud.
_AZURE_US_GOVERNMENT = _cloud(
    "https://login.microsoftonline.us",
    {
        ResourceType.DEFAULT: "https://management.core.usgovcloudapi.net/",
        ResourceType.ARM: "https://management.core.usgovcloudapi.net/",
        ResourceType.RM: "https://management.core.usgovcloudapi.net/",
        ResourceType.KEYVAULT: "https://vault.usgovcloudapi.net",
        ResourceType.VAULT: "https://vault.usgovcloudapi.net",
        ResourceType.DATABASE: "https://database.usgovcloudapi.net/",
        ResourceType.AZURESQL: "https://database.usgovcloudapi.net/",
        ResourceType.EVENTHUBS: "https://eventhubs.azure.net",
        ResourceType.SERVICEBUS: "https://servicebus.azure.net",
        ResourceType.STORAGE: "https://storage.azure.com/",
    },
)

_AZURE_GERMANY = _cloud(
    "https://login.microsoftonline.de",
    {
        ResourceType.DEFAULT: "https://management.core.cloudapi.de/",
        ResourceType.ARM: "https://management.core.cloudapi.de/",
        ResourceType.RM: "https://management.core.cloudapi.de/",
        ResourceType.KEYVAULT: "https://vault.microsoftazure.de",
        ResourceType.VAULT: "https://vault.microsoftazure.de",
        ResourceType.DATABASE: "https://database.cloudapi.de/",
        ResourceType.AZURESQL: "https://database.cloudapi.de/",
        ResourceType.EVENTHUBS: "https://eventhubs.azure.net",
        ResourceType.SERVICEBUS: "https://servicebus.azure.net",
        ResourceType.STORAGE: "https://storage.azure.com/",
    },
)

_AZURE_CHINA = _cloud(
    "https://login.chinacloudapi.cn",
    {
        ResourceType.DEFAULT: "https://management.core.chinacloudapi.cn/",
        ResourceType.ARM: "https://management.core.chinacloudapi.cn/",
        ResourceType.RM: "https://management.core.chinacloudapi.cn/",
        ResourceType.KEYVAULT: "https://vault.azure.cn",
        ResourceType.VAULT: "https://vault.azure.cn",
        ResourceType.DATABASE: "https://database.chinacloudapi.cn/",
        ResourceType.AZURESQL: "https://database.chinacloudapi.cn/",
        ResourceType.EVENTHUBS: "https://eventhubs.azure.net",
        ResourceType.SERVICEBUS: "https://servicebus.azure.net",
        ResourceType.STORAGE: "https://storage.azure.com/",
    },
)

ENVIRONMENTS: Final[Mapping[Environment, CloudEndpoints]] = MappingProxyType(
    {
        Environment.AZURE: _AZURE,
        Environment.AZURE_US_GOVERNMENT: _AZURE_US_GOVERNMENT,
        Environment.AZURE_GERMANY: _AZURE_GERMANY,
        Environment.AZURE_CHINA: _AZURE_CHINA,
    }
)
