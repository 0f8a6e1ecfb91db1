"""Cliente async para el API de Lemon Squeezy.

    from lemonsqueezy import lemon_squeezy_setup, get_store

    lemon_squeezy_setup(api_key="...")
    response = await get_store(1)
    if response.error:
        ...
"""

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.client import LemonSqueezy
from lemonsqueezy.core.config import (
    API_BASE_URL,
    ClientSettings,
    Config,
    get_config,
    lemon_squeezy_setup,
)
from lemonsqueezy.core.domain.models import (
    ActivateLicense,
    DeactivateLicense,
    FetchOptions,
    FetchResponse,
    LemonSqueezyListResponse,
    LemonSqueezyResponse,
    ListParams,
    ValidateLicense,
)
from lemonsqueezy.core.errors import (
    ConfigurationError,
    ErrorKind,
    LemonSqueezyError,
    RequiredParameterError,
    TransportError,
    UpstreamApiError,
    ValidationError,
)
from lemonsqueezy.core.params import UNSET, generate_discount
from lemonsqueezy.resources import *  # noqa: F401,F403
from lemonsqueezy.resources import __all__ as _resource_functions

__all__ = [
    "API_BASE_URL",
    "ActivateLicense",
    "ClientSettings",
    "Config",
    "ConfigurationError",
    "DeactivateLicense",
    "ErrorKind",
    "FetchOptions",
    "FetchResponse",
    "LemonSqueezy",
    "LemonSqueezyError",
    "LemonSqueezyListResponse",
    "LemonSqueezyResponse",
    "ListParams",
    "RequiredParameterError",
    "TransportError",
    "UNSET",
    "UpstreamApiError",
    "ValidateLicense",
    "ValidationError",
    "fetch",
    "generate_discount",
    "get_config",
    "lemon_squeezy_setup",
    *_resource_functions,
]
