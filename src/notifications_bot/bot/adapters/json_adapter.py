# -*- coding: utf-8 -*-
"""JSON command adapter.

Request body:

    {"recipient": "slack:ops", "subscribe": {"app": "guestbook", "trigger": "on-sync-failed"}}

with exactly one of "list_subscriptions" (any truthy value or {}), "subscribe" or
"unsubscribe". Replies are text/plain.
"""

from __future__ import annotations

import json
from typing import Any

from aiohttp import web

from notifications_bot.bot.adapters.base import BaseAdapter
from notifications_bot.exceptions import InvalidRequestError
from notifications_bot.models.command import Command, UpdateTarget, command_from_fields


def _target(payload: dict[str, Any], field: str) -> UpdateTarget | None:
    if field not in payload or payload[field] is None:
        return None
    value = payload[field]
    if not isinstance(value, dict):
        raise InvalidRequestError(f"'{field}' must be an object")
    return UpdateTarget.from_dict(value)


class JsonCommandAdapter(BaseAdapter):
    """Decodes commands from a JSON body and answers in plain text."""

    async def parse(self, request: web.Request) -> Command:
        try:
            payload = await request.json()
        except json.JSONDecodeError as exc:
            raise InvalidRequestError(f"invalid JSON body: {exc.msg}") from exc
        if not isinstance(payload, dict):
            raise InvalidRequestError("request body must be a JSON object")

        recipient = str(payload.get("recipient") or "").strip()
        if not recipient:
            raise InvalidRequestError("recipient is required")

        return command_from_fields(
            recipient,
            # {} marks the command; only null/false mean unset
            list_subscriptions=payload.get("list_subscriptions") not in (None, False),
            subscribe=_target(payload, "subscribe"),
            unsubscribe=_target(payload, "unsubscribe"),
        )

    def send_response(self, text: str) -> web.Response:
        return web.Response(text=text, content_type="text/plain")
