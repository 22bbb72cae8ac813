"""Value objects for the size-constrained alert channel.

Purpose
-------
Describe the validated alert configuration, the outgoing message handed to
the notification medium, and the explicit result of a delivery attempt.

Contents
--------
* :class:`AlertConfig` – eagerly validated, immutable channel settings.
* :class:`OutgoingAlert` – originator, recipients and (possibly truncated) body.
* :class:`DeliveryResult` – success/failure value returned by notifiers.
* :func:`truncate_body` – payload-length contract of the medium.

System Role
-----------
Keeps the only non-trivial rules of the alert path (validation and
truncation) in the domain layer where they can be tested without I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

DEFAULT_MAX_BODY_CHARS = 140
DEFAULT_TRUNCATION_MARKER = " ..."
DEFAULT_TIMEOUT_SECONDS = 10.0


def truncate_body(text: str, limit: int = DEFAULT_MAX_BODY_CHARS, marker: str = DEFAULT_TRUNCATION_MARKER) -> str:
    """Shorten ``text`` to ``limit`` characters and append ``marker``.

    Texts of exactly ``limit`` characters are returned unchanged.

    Examples
    --------
    >>> truncate_body("x" * 140) == "x" * 140
    True
    >>> truncate_body("x" * 141)[-5:]
    'x ...'
    >>> len(truncate_body("x" * 500))
    144
    """

    if len(text) > limit:
        return text[:limit] + marker
    return text


def split_recipients(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalise recipients given as a comma-separated string or a sequence.

    Examples
    --------
    >>> split_recipients("31600000001, 31600000002,")
    ('31600000001', '31600000002')
    """

    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else list(value)
    return tuple(str(item).strip() for item in items if str(item).strip())


@dataclass(slots=True, frozen=True)
class AlertConfig:
    """Immutable alert channel configuration validated at construction.

    Attributes
    ----------
    api_key:
        Credential for the notification medium.
    originator:
        Sender identifier shown to recipients.
    recipients:
        Ordered, non-empty tuple of recipient identifiers.
    max_body_chars:
        Body length above which the text is truncated.
    truncation_marker:
        Suffix appended to truncated bodies.
    timeout:
        Upper bound in seconds for one hand-off to the medium.
    """

    api_key: str
    originator: str
    recipients: tuple[str, ...]
    max_body_chars: int = DEFAULT_MAX_BODY_CHARS
    truncation_marker: str = DEFAULT_TRUNCATION_MARKER
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "recipients", split_recipients(self.recipients))
        missing = [
            name
            for name, value in (("api_key", self.api_key), ("originator", self.originator))
            if not isinstance(value, str) or not value.strip()
        ]
        if not self.recipients:
            missing.append("recipients")
        if missing:
            raise ConfigurationError(
                f"Incomplete alert configuration, missing or empty: {', '.join(missing)}. "
                "Required: api_key, originator, recipients"
            )
        if isinstance(self.max_body_chars, bool) or not isinstance(self.max_body_chars, int) or self.max_body_chars <= 0:
            raise ConfigurationError("max_body_chars must be a positive integer")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError("timeout must be a positive number")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "AlertConfig":
        """Build a config from loosely named options (``apiKey``, ``sender`` ...).

        Examples
        --------
        >>> config = AlertConfig.from_options({"apiKey": "k", "originator": "Ops", "recipients": "1,2"})
        >>> config.recipients
        ('1', '2')
        """

        def pick(*names: str) -> Any:
            for name in names:
                if options.get(name) is not None:
                    return options[name]
            return None

        extras: dict[str, Any] = {}
        marker = pick("truncation_marker", "truncationMarker")
        if marker is not None:
            extras["truncation_marker"] = str(marker)
        try:
            limit = pick("max_body_chars", "maxBodyChars")
            if limit is not None:
                extras["max_body_chars"] = int(limit)
            timeout = pick("timeout")
            if timeout is not None:
                extras["timeout"] = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid alert limit: {exc}") from exc
        return cls(
            api_key=pick("api_key", "apiKey") or "",
            originator=pick("originator", "sender") or "",
            recipients=pick("recipients") or (),
            **extras,
        )


@dataclass(slots=True, frozen=True)
class OutgoingAlert:
    """Message handed to the external notification medium."""

    originator: str
    recipients: tuple[str, ...]
    body: str

    def to_payload(self) -> dict[str, Any]:
        return {"originator": self.originator, "recipients": list(self.recipients), "body": self.body}


@dataclass(slots=True, frozen=True)
class DeliveryResult:
    """Outcome of one hand-off to the notification medium."""

    ok: bool
    error_kind: str | None = None
    description: str | None = None
    reference: str | None = None

    @classmethod
    def success(cls, reference: str | None = None) -> "DeliveryResult":
        return cls(ok=True, reference=reference)

    @classmethod
    def failure(cls, kind: str, description: str) -> "DeliveryResult":
        return cls(ok=False, error_kind=kind, description=description)


__all__ = [
    "AlertConfig",
    "DEFAULT_MAX_BODY_CHARS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_TRUNCATION_MARKER",
    "DeliveryResult",
    "OutgoingAlert",
    "split_recipients",
    "truncate_body",
]
