"""Usuario autenticado (dueño de la API key)."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall


def get_authenticated_user() -> ApiCall:
    return fetch({"path": "/v1/users/me"})
