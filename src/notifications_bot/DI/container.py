# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from notifications_bot.bot import BotServer, JsonCommandAdapter
from notifications_bot.clients.kubernetes import AsyncCustomObjectsClient
from notifications_bot.config import Settings, get_settings
from notifications_bot.models.resource import ResourceKind
from notifications_bot.persistence.repositories.kubernetes import KubernetesResourceCollection
from notifications_bot.services.commands import CommandRouter
from notifications_bot.services.subscriptions import SubscriptionService
from notifications_bot.subscriptions.annotations import AnnotationKeySelector


def _build_key_selector(settings: Settings) -> AnnotationKeySelector:
    """Build the annotation key policy from SUBSCRIPTIONS__* settings."""
    return AnnotationKeySelector(
        base=settings.subscriptions.annotation_key,
        empty_trigger_scope=settings.subscriptions.empty_trigger_scope,
    )


def _max_conflict_retries(settings: Settings) -> int:
    return settings.subscriptions.max_conflict_retries


def _application_plural(settings: Settings) -> str:
    return settings.kubernetes.application_plural


def _project_plural(settings: Settings) -> str:
    return settings.kubernetes.project_plural


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, Kubernetes client, collections, services and server."""

    config = providers.Callable(get_settings)

    custom_objects_client = providers.Singleton(
        AsyncCustomObjectsClient,
        settings=config,
    )

    application_collection = providers.Singleton(
        KubernetesResourceCollection,
        client=custom_objects_client,
        kind=ResourceKind.APPLICATION,
        plural=providers.Callable(_application_plural, config),
    )

    project_collection = providers.Singleton(
        KubernetesResourceCollection,
        client=custom_objects_client,
        kind=ResourceKind.PROJECT,
        plural=providers.Callable(_project_plural, config),
    )

    key_selector = providers.Singleton(_build_key_selector, config)

    subscription_service = providers.Singleton(
        SubscriptionService,
        applications=application_collection,
        projects=project_collection,
        selector=key_selector,
        max_conflict_retries=providers.Callable(_max_conflict_retries, config),
    )

    command_router = providers.Singleton(
        CommandRouter,
        subscription_service=subscription_service,
    )

    json_adapter = providers.Singleton(JsonCommandAdapter)

    bot_server = providers.Singleton(
        BotServer,
        router=command_router,
    )
