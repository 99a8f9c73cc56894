"""Subscription service: subscribe/unsubscribe/list against application and project collections.

One generic implementation bound to two IResourceCollection instances. Updates
follow read -> mutate -> diff -> conditional patch; the patch carries the fetched
resourceVersion and is retried from a fresh read when it conflicts.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from notifications_bot.exceptions import (
    ConflictError,
    MissingTargetError,
    ResourceNotFoundError,
)
from notifications_bot.models.command import UpdateTarget
from notifications_bot.models.recipient import Destination, parse_destination_and_template
from notifications_bot.models.resource import ResourceKind
from notifications_bot.persistence.repositories.interfaces.resource_collection import (
    IResourceCollection,
)
from notifications_bot.subscriptions.annotations import AnnotationKeySelector, normalize_recipient
from notifications_bot.subscriptions.diff import annotations_patch
from notifications_bot.subscriptions.matcher import matched_destinations
from notifications_bot.subscriptions.mutator import add_subscription, remove_subscription

SUBSCRIPTION_UPDATED = "subscription updated"


class SubscriptionService:
    """Manages recipient subscriptions stored in application/project annotations."""

    def __init__(
        self,
        applications: IResourceCollection,
        projects: IResourceCollection,
        selector: AnnotationKeySelector,
        *,
        max_conflict_retries: int = 3,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            applications: Application collection (injected).
            projects: AppProject collection (injected).
            selector: Annotation key policy (base key, empty-trigger removal scope).
            max_conflict_retries: Extra attempts after a resourceVersion conflict.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._applications = applications
        self._projects = projects
        self._selector = selector
        self._max_conflict_retries = max_conflict_retries
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _resolve_target(self, target: UpdateTarget) -> tuple[IResourceCollection, str]:
        if target.app:
            return self._applications, target.app
        if target.project:
            return self._projects, target.project
        raise MissingTargetError()

    def _apply(self, annotations: dict[str, str], recipient: str, subscribe: bool, trigger: str) -> dict[str, str]:
        if subscribe:
            return add_subscription(annotations, recipient, trigger, base=self._selector.base)
        return remove_subscription(annotations, recipient, trigger, selector=self._selector)

    async def update_subscription(
        self,
        recipient: str,
        subscribe: bool,
        target: UpdateTarget,
    ) -> str:
        """Add or remove recipient on the targeted application or project.

        Writes only when the annotations actually change. On a resourceVersion
        conflict the resource is re-read and the change reapplied, up to
        max_conflict_retries extra times.

        Returns:
            "subscription updated" (also when nothing needed to change).

        Raises:
            InvalidRecipientError: If recipient is empty or holds a comma, or, when
                subscribing, is not a valid destination (no remote call is made).
            MissingTargetError: If neither app nor project is set (no remote call is made).
            ResourceNotFoundError: If the target does not exist.
            ConflictError: If every attempt conflicted.
            RemoteFailureError: If get or patch fails.
        """
        recipient = normalize_recipient(recipient)
        if subscribe:
            # unsubscribe stays lenient so malformed entries can still be removed
            parse_destination_and_template(recipient)
        collection, name = self._resolve_target(target)
        action = "subscribe" if subscribe else "unsubscribe"

        with bound_contextvars(
            action=action,
            kind=collection.kind.value,
            resource_name=name,
            trigger=target.trigger,
        ):
            attempt = 0
            while True:
                resource = await collection.get(name)
                if resource is None:
                    raise ResourceNotFoundError(collection.kind.value, name)

                old_annotations = dict(resource.annotations)
                new_annotations = self._apply(old_annotations, recipient, subscribe, target.trigger)
                diff = annotations_patch(old_annotations, new_annotations)
                if not diff:
                    self._logger.debug("subscription_unchanged")
                    return SUBSCRIPTION_UPDATED

                try:
                    await collection.patch_annotations(
                        name,
                        diff,
                        resource_version=resource.resource_version,
                    )
                except ConflictError:
                    attempt += 1
                    if attempt > self._max_conflict_retries:
                        self._logger.warning("subscription_conflict_retries_exhausted", attempts=attempt)
                        raise
                    self._logger.info("subscription_conflict_retry", attempt=attempt)
                    continue

                self._logger.info("subscription_updated", changed_keys=sorted(diff))
                return SUBSCRIPTION_UPDATED

    async def _subscribed_identities(
        self,
        collection: IResourceCollection,
        destination: Destination,
    ) -> list[str]:
        identities: list[str] = []
        for resource in await collection.list():
            if destination in matched_destinations(resource.annotations, self._selector.base):
                identities.append(resource.identity)
        return identities

    async def list_subscriptions(self, recipient: str) -> str:
        """Describe which applications and projects the recipient's destination is subscribed to.

        Raises:
            InvalidRecipientError: If the recipient, or any recipient stored on a scanned
                resource, is malformed.
            RemoteFailureError: If listing either collection fails.
        """
        destination, _ = parse_destination_and_template(recipient)
        apps = await self._subscribed_identities(self._applications, destination)
        projects = await self._subscribed_identities(self._projects, destination)

        self._logger.debug(
            "subscriptions_listed",
            destination=str(destination),
            applications=len(apps),
            projects=len(projects),
        )
        return format_subscriptions(recipient, {ResourceKind.APPLICATION: apps, ResourceKind.PROJECT: projects})


def format_subscriptions(recipient: str, identities: dict[ResourceKind, list[str]]) -> str:
    """Render the listing reply text."""
    apps = identities.get(ResourceKind.APPLICATION, [])
    projects = identities.get(ResourceKind.PROJECT, [])
    if not apps and not projects:
        return f"The {recipient} has no subscriptions."

    response = (
        f"The {recipient} is subscribed to {len(apps)} applications and {len(projects)} projects."
    )
    if apps:
        response = f"{response}\nApplications: {', '.join(apps)}."
    if projects:
        response = f"{response}\nProjects: {', '.join(projects)}."
    return response
