# -*- coding: utf-8 -*-
"""Kubernetes-backed resource collection for Argo CD Applications and AppProjects.

Translates client failures into the bot's error types at this boundary:
404 on get -> None, 409 on patch -> ConflictError, any other ApiException or a
transport error (urllib3 HTTPError, OSError such as a refused connection) ->
RemoteFailureError.
"""

from __future__ import annotations

import structlog
from typing import Any, Callable, Optional

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from notifications_bot.clients.kubernetes import AsyncCustomObjectsClient
from notifications_bot.exceptions import ConflictError, RemoteFailureError
from notifications_bot.models.resource import ManagedResource, ResourceKind
from notifications_bot.persistence.repositories.interfaces.resource_collection import (
    IResourceCollection,
)
from notifications_bot.subscriptions.diff import PatchDiff, build_merge_patch

TRANSPORT_ERRORS: tuple[type[Exception], ...] = (HTTPError, OSError)


def _remote_failure(action: str, kind: ResourceKind, exc: ApiException) -> RemoteFailureError:
    return RemoteFailureError(
        f"cannot {action} {kind.value}: {exc.status} {exc.reason}",
        status_code=exc.status,
        cause=exc,
    )


def _transport_failure(action: str, kind: ResourceKind, exc: Exception) -> RemoteFailureError:
    return RemoteFailureError(
        f"cannot {action} {kind.value}: {type(exc).__name__}: {exc}",
        cause=exc,
    )


class KubernetesResourceCollection(IResourceCollection):
    """IResourceCollection over one custom resource plural in the configured namespace."""

    def __init__(
        self,
        client: AsyncCustomObjectsClient,
        kind: ResourceKind,
        plural: str,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the collection.

        Args:
            client: Async CustomObjectsApi facade (injected).
            kind: Resource kind held by this collection.
            plural: CRD plural, e.g. 'applications' or 'appprojects'.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._client = client
        self._kind = kind
        self._plural = plural
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def _log_transport_error(self, event: str, exc: Exception, **fields: Any) -> None:
        self._logger.warning(
            event,
            kind=self._kind.value,
            error=str(exc),
            error_type=type(exc).__name__,
            **fields,
        )

    async def get(self, name: str) -> Optional[ManagedResource]:
        try:
            raw = await self._client.get(self._plural, name)
        except ApiException as exc:
            if exc.status == 404:
                return None
            self._logger.warning(
                "k8s_get_failed",
                kind=self._kind.value,
                name=name,
                status=exc.status,
            )
            raise _remote_failure("get", self._kind, exc) from exc
        except TRANSPORT_ERRORS as exc:
            self._log_transport_error("k8s_get_failed", exc, name=name)
            raise _transport_failure("get", self._kind, exc) from exc
        return ManagedResource.from_dict(raw)

    async def list(self) -> list[ManagedResource]:
        try:
            items = await self._client.list(self._plural)
        except ApiException as exc:
            self._logger.warning("k8s_list_failed", kind=self._kind.value, status=exc.status)
            raise _remote_failure("list", self._kind, exc) from exc
        except TRANSPORT_ERRORS as exc:
            self._log_transport_error("k8s_list_failed", exc)
            raise _transport_failure("list", self._kind, exc) from exc
        return [ManagedResource.from_dict(item) for item in items]

    async def patch_annotations(
        self,
        name: str,
        diff: PatchDiff,
        *,
        resource_version: str | None = None,
    ) -> None:
        body = build_merge_patch(diff, resource_version)
        try:
            await self._client.merge_patch(self._plural, name, body)
        except ApiException as exc:
            if exc.status == 409:
                raise ConflictError(
                    f"{self._kind.value} '{name}' was modified concurrently",
                    cause=exc,
                ) from exc
            self._logger.warning(
                "k8s_patch_failed",
                kind=self._kind.value,
                name=name,
                status=exc.status,
            )
            raise _remote_failure("patch", self._kind, exc) from exc
        except TRANSPORT_ERRORS as exc:
            self._log_transport_error("k8s_patch_failed", exc, name=name)
            raise _transport_failure("patch", self._kind, exc) from exc
