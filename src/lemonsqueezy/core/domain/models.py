"""Modelos del dominio (Pydantic v2).

Contenido:
- `FetchOptions`: descriptor de una request (path/method/query/body).
- `FetchResponse`: envelope uniforme `(status_code, data, error)`.
- Modelos JSON:API de lectura (`LemonSqueezyResponse` y compañía) y los
  parámetros de listado (`ListParams`).

Nota:
- El pipeline devuelve `data` como JSON crudo (dict). Los modelos JSON:API
  son opcionales: se aplican con `FetchResponse.parse(...)`.
"""

from __future__ import annotations

from collections.abc import Coroutine
from typing import Any, Generic, Literal, TypedDict, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from lemonsqueezy.core.errors import LemonSqueezyError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]


class FetchOptions(BaseModel):
    """Request inmutable; el pipeline la consume una sola vez."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        pattern=r"^/v1/",
        description="Path del endpoint (p.ej. '/v1/stores/1').",
    )
    method: HttpMethod = Field(
        default="GET",
        description="Método HTTP.",
    )
    query: dict[str, Any] | None = Field(
        default=None,
        description="Parámetros extra del query string (valores se pasan a str).",
    )
    body: dict[str, Any] | None = Field(
        default=None,
        description="Cuerpo JSON:API (solo se envía en POST/PATCH).",
    )


class FetchResponse(BaseModel, Generic[T]):
    """Envelope devuelto por todas las llamadas.

    Invariantes:
    - `status_code` es None solo si no llegó a haber respuesta HTTP.
    - En éxito `error` es None; en fallo `data` es None salvo que el API
      devuelva un cuerpo con `error` (endpoints de licencias).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int | None = None
    data: T | None = None
    error: LemonSqueezyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> FetchResponse[T]:
        if self.error is not None:
            raise self.error
        return self

    def parse(self, model: type[M]) -> M | None:
        """Valida `data` contra un modelo (p.ej. `LemonSqueezyResponse`)."""

        if self.data is None:
            return None
        return model.model_validate(self.data)


# ---------------------------------------------------------------------------
# JSON:API
# ---------------------------------------------------------------------------


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ResourceLinks(_ApiModel):
    self_: str = Field(..., alias="self")


class RelationshipData(_ApiModel):
    id: str
    type: str


class RelationshipLinks(_ApiModel):
    links: dict[str, str] = Field(default_factory=dict)
    data: RelationshipData | list[RelationshipData] | None = None


class ResourceData(_ApiModel):
    type: str = Field(..., description="Tipo del recurso ('stores', 'orders', ...).")
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, RelationshipLinks] = Field(default_factory=dict)
    links: ResourceLinks | None = None


class MetaPage(_ApiModel):
    current_page: int = Field(..., alias="currentPage")
    from_: int | None = Field(default=None, alias="from")
    last_page: int = Field(..., alias="lastPage")
    per_page: int = Field(..., alias="perPage")
    to: int | None = None
    total: int


class Meta(_ApiModel):
    test_mode: bool | None = None
    page: MetaPage | None = None


class PageLinks(_ApiModel):
    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None


class JsonApiVersion(_ApiModel):
    version: str


class LemonSqueezyResponse(_ApiModel):
    """Respuesta de un recurso individual."""

    jsonapi: JsonApiVersion | None = None
    links: ResourceLinks | dict[str, Any] | None = None
    meta: Meta | None = None
    data: ResourceData
    included: list[ResourceData] | None = None


class LemonSqueezyListResponse(_ApiModel):
    """Respuesta paginada de un listado."""

    jsonapi: JsonApiVersion | None = None
    links: PageLinks | None = None
    meta: Meta | None = None
    data: list[ResourceData] = Field(default_factory=list)
    included: list[ResourceData] | None = None


# ---------------------------------------------------------------------------
# License API (no JSON:API: cuerpo plano, también en error)
# ---------------------------------------------------------------------------


class LicenseKeyInfo(_ApiModel):
    id: int
    status: Literal["inactive", "active", "expired", "disabled"]
    key: str
    activation_limit: int | None = None
    activation_usage: int = 0
    created_at: str
    expires_at: str | None = None
    test_mode: bool | None = None


class LicenseInstance(_ApiModel):
    id: str
    name: str
    created_at: str


class LicenseMeta(_ApiModel):
    store_id: int
    order_id: int
    order_item_id: int
    product_id: int
    product_name: str
    variant_id: int
    variant_name: str
    customer_id: int
    customer_name: str
    customer_email: str


class _LicenseResponse(_ApiModel):
    error: str | None = None
    license_key: LicenseKeyInfo | None = None
    meta: LicenseMeta | None = None


class ActivateLicense(_LicenseResponse):
    activated: bool
    instance: LicenseInstance | None = None


class ValidateLicense(_LicenseResponse):
    valid: bool
    instance: LicenseInstance | None = None


class DeactivateLicense(_LicenseResponse):
    deactivated: bool


# ---------------------------------------------------------------------------
# Parámetros de listado
# ---------------------------------------------------------------------------


class Page(TypedDict, total=False):
    number: int
    size: int


class ListParams(TypedDict, total=False):
    """`filter` admite keys camelCase o snake_case (`storeId` == `store_id`)."""

    include: list[str]
    filter: dict[str, Any]
    page: Page


class GetParams(TypedDict, total=False):
    include: list[str]


ResourceId = int | str

ApiCall = Coroutine[Any, Any, FetchResponse[Any]]
