"""Patch diff engine: minimal annotation changes for a JSON merge patch.

A PatchDiff maps each changed key to its new value, or to None when the key was
removed (JSON null deletes a key under merge-patch semantics). Unchanged keys are
never included.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PatchDiff = dict[str, str | None]


def annotations_patch(old: Mapping[str, str], new: Mapping[str, str]) -> PatchDiff:
    """Return the keys added/changed (new value) and removed (None) between old and new."""
    patch: PatchDiff = {}
    for key, value in new.items():
        if key not in old or old[key] != value:
            patch[key] = value
    for key in old:
        if key not in new:
            patch[key] = None
    return patch


def build_merge_patch(diff: PatchDiff, resource_version: str | None = None) -> dict[str, Any]:
    """Wrap a diff into a metadata merge-patch body.

    When resource_version is given it is sent as well; the API server then rejects
    the patch with 409 Conflict if the object changed since it was read.
    """
    metadata: dict[str, Any] = {"annotations": dict(diff)}
    if resource_version:
        metadata["resourceVersion"] = resource_version
    return {"metadata": metadata}
