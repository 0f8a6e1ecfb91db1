"""Files (descargas asociadas a variants): solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_file(file_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"file_id": file_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/files/{file_id}{convert_include_to_query_string(include)}"})


def list_files(params: ListParams | None = None) -> ApiCall:
    """Filtros: `variant_id`."""

    return fetch({"path": f"/v1/files{convert_list_params_to_query_string(params)}"})
