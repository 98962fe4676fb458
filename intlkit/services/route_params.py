"""Query parameters shared by every in-app link."""

import httpx

_common_params: dict[str, str] = {}


def set_common_params(**params: str) -> None:
    _common_params.update(params)


def get_common_params() -> dict[str, str]:
    return dict(_common_params)


def clear_common_params() -> None:
    _common_params.clear()


def build_url(path: str, params: dict[str, str] | None = None) -> str:
    """Append the common parameters (then ``params``) to ``path``."""
    merged = {**_common_params, **(params or {})}
    if not merged:
        return path
    return str(httpx.URL(path).copy_merge_params(merged))
