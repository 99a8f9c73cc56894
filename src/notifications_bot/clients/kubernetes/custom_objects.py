# -*- coding: utf-8 -*-
"""Async facade for the Kubernetes CustomObjectsApi with asyncio.to_thread.

Centralizes client construction from settings (in-cluster service account or
kubeconfig) and runs the sync kubernetes client calls in a thread pool so callers
can use async/await without blocking the event loop.
"""

from __future__ import annotations

import asyncio
import structlog
from typing import Any, Callable, Optional, TypeVar, cast

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config

from notifications_bot.config import Settings

T = TypeVar("T")

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


def _build_api_client(settings: Settings) -> k8s_client.ApiClient:
    """Build a kubernetes ApiClient from settings.

    Uses the pod service account when KUBERNETES__IN_CLUSTER is set, otherwise the
    kubeconfig file (KUBERNETES__KUBECONFIG, default ~/.kube/config) and context.
    """
    kube = settings.kubernetes
    if kube.in_cluster:
        configuration = k8s_client.Configuration()
        k8s_config.load_incluster_config(client_configuration=configuration)
        return k8s_client.ApiClient(configuration)
    return k8s_config.new_client_from_config(
        config_file=kube.kubeconfig,
        context=kube.context,
    )


class AsyncCustomObjectsClient:
    """Async wrapper around CustomObjectsApi for one namespace. All calls run via asyncio.to_thread."""

    def __init__(
        self,
        settings: Settings,
        *,
        api: Optional[k8s_client.CustomObjectsApi] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize from settings or an existing CustomObjectsApi.

        Args:
            settings: Application settings (namespace, API group/version, kube access).
            api: Optional pre-built CustomObjectsApi. If None, builds from settings.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._api = api if api is not None else k8s_client.CustomObjectsApi(_build_api_client(settings))
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def namespace(self) -> str:
        return self._settings.kubernetes.namespace

    async def _run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a sync kubernetes call in a thread."""
        return await asyncio.to_thread(fn, *args, **kwargs)

    def _coordinates(self, plural: str) -> dict[str, str]:
        kube = self._settings.kubernetes
        return {
            "group": kube.group,
            "version": kube.version,
            "namespace": kube.namespace,
            "plural": plural,
        }

    async def get(self, plural: str, name: str) -> dict[str, Any]:
        """GET one namespaced custom object. Raises kubernetes ApiException on failure."""
        return cast(
            dict[str, Any],
            await self._run(
                self._api.get_namespaced_custom_object,
                name=name,
                **self._coordinates(plural),
            ),
        )

    async def list(self, plural: str) -> list[dict[str, Any]]:
        """LIST namespaced custom objects and return the items."""
        raw = await self._run(
            self._api.list_namespaced_custom_object,
            **self._coordinates(plural),
        )
        return list(cast(dict[str, Any], raw).get("items") or [])

    async def merge_patch(self, plural: str, name: str, body: dict[str, Any]) -> dict[str, Any]:
        """PATCH one namespaced custom object with a JSON merge patch."""
        self._logger.debug(
            "k8s_merge_patch",
            plural=plural,
            name=name,
            namespace=self.namespace,
        )
        return cast(
            dict[str, Any],
            await self._run(
                self._api.patch_namespaced_custom_object,
                name=name,
                body=body,
                _content_type=MERGE_PATCH_CONTENT_TYPE,
                **self._coordinates(plural),
            ),
        )
