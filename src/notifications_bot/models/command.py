"""Bot commands as an explicit sum type.

Exactly one of ListSubscriptions, Subscribe or Unsubscribe. Adapters that decode
a wire format with one optional field per variant go through command_from_fields(),
which rejects both "none set" and "several set".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from notifications_bot.exceptions import AmbiguousCommandError, UnknownCommandError


@dataclass(frozen=True, slots=True)
class UpdateTarget:
    """Resource and trigger a subscribe/unsubscribe applies to.

    app takes precedence over project when both are set; trigger '' is the default key.
    """

    app: str = ""
    project: str = ""
    trigger: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UpdateTarget:
        return cls(
            app=str(data.get("app") or "").strip(),
            project=str(data.get("project") or "").strip(),
            trigger=str(data.get("trigger") or "").strip(),
        )


@dataclass(frozen=True, slots=True)
class ListSubscriptions:
    recipient: str


@dataclass(frozen=True, slots=True)
class Subscribe:
    recipient: str
    target: UpdateTarget


@dataclass(frozen=True, slots=True)
class Unsubscribe:
    recipient: str
    target: UpdateTarget


Command = Union[ListSubscriptions, Subscribe, Unsubscribe]


def command_from_fields(
    recipient: str,
    *,
    list_subscriptions: bool = False,
    subscribe: UpdateTarget | None = None,
    unsubscribe: UpdateTarget | None = None,
) -> Command:
    """Build the single command variant that is set.

    Raises:
        UnknownCommandError: If no variant is set.
        AmbiguousCommandError: If more than one variant is set.
    """
    variants: list[tuple[str, Command]] = []
    if list_subscriptions:
        variants.append(("list_subscriptions", ListSubscriptions(recipient=recipient)))
    if subscribe is not None:
        variants.append(("subscribe", Subscribe(recipient=recipient, target=subscribe)))
    if unsubscribe is not None:
        variants.append(("unsubscribe", Unsubscribe(recipient=recipient, target=unsubscribe)))

    if not variants:
        raise UnknownCommandError()
    if len(variants) > 1:
        raise AmbiguousCommandError([name for name, _ in variants])
    return variants[0][1]
