"""Header merging helpers."""

from __future__ import annotations

from collections.abc import Mapping

from pizza_httpx.types import Headers


def merge_headers(*layers: Mapping[str, str] | None) -> Headers:
    """
    Overlay header mappings from left to right into a new dict.

    Header names are compared case-insensitively. When a later layer sets a
    header that is already present, the earlier entry is dropped and the
    later name and value are kept. None layers are skipped.

    Example:
        >>> merge_headers({"Accept": "application/json"}, {"accept": "text/plain"})
        {'accept': 'text/plain'}
    """
    merged: Headers = {}
    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            for existing in [key for key in merged if key.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged
