# -*- coding: utf-8 -*-
"""Async facade for the Kubernetes CustomObjectsApi with asyncio.to_thread."""

from notifications_bot.clients.kubernetes.custom_objects import AsyncCustomObjectsClient

__all__ = ["AsyncCustomObjectsClient"]
