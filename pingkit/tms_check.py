"""Transaction (TMS) check definitions and their validation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .jsonutil import _marshal

VALID_INTERVALS = frozenset({0, 5, 10, 20, 60, 720, 1440})
VALID_SEVERITY_LEVELS = frozenset({"", "high", "low"})
_TAG_PATTERN = re.compile(r"[0-9A-Za-z_-]+")


@dataclass
class TMSCheckStep:
    """One step of a transaction check script."""

    fn: str = ""
    args: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.args:
            out["args"] = dict(sorted(self.args.items()))
        if self.fn:
            out["fn"] = self.fn
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TMSCheckStep:
        return cls(fn=data.get("fn") or "", args=dict(data.get("args") or {}))


@dataclass
class TMSCheckMetaData:
    """Browser settings for a transaction check."""

    authentications: Any = None
    disable_web_security: bool = False
    height: int = 0
    width: int = 0

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.authentications is not None:
            out["authentications"] = self.authentications
        if self.disable_web_security:
            out["disableWebSecurity"] = True
        if self.height:
            out["height"] = self.height
        if self.width:
            out["width"] = self.width
        return out


def _metadata_from_dict(data: dict[str, Any]) -> TMSCheckMetaData:
    return TMSCheckMetaData(
        authentications=data.get("authentications"),
        disable_web_security=bool(data.get("disableWebSecurity", False)),
        height=data.get("height") or 0,
        width=data.get("width") or 0,
    )


@dataclass
class TMSCheck:
    """A transaction check as submitted to the API."""

    name: str = ""
    steps: list[TMSCheckStep] = field(default_factory=list)
    active: bool = False
    contact_ids: list[int] = field(default_factory=list)
    custom_message: str = ""
    integration_ids: list[int] = field(default_factory=list)
    interval: int = 0
    metadata: TMSCheckMetaData | None = None
    region: str = ""
    send_notification_when_down: int = 0
    severity_level: str = ""
    tags: list[str] = field(default_factory=list)
    team_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.steps:
            out["steps"] = [step.to_dict() for step in self.steps]
        out["active"] = self.active
        if self.contact_ids:
            out["contact_ids"] = list(self.contact_ids)
        if self.custom_message:
            out["custom_message"] = self.custom_message
        if self.integration_ids:
            out["integration_ids"] = list(self.integration_ids)
        if self.interval:
            out["interval"] = self.interval
        if self.metadata is not None:
            out["metadata"] = self.metadata.to_dict()
        if self.region:
            out["region"] = self.region
        if self.send_notification_when_down:
            out["send_notification_when_down"] = self.send_notification_when_down
        if self.severity_level:
            out["severity_level"] = self.severity_level
        if self.tags:
            out["tags"] = list(self.tags)
        if self.team_ids:
            out["team_ids"] = list(self.team_ids)
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TMSCheck:
        metadata = data.get("metadata")
        return cls(
            name=data.get("name") or "",
            steps=[TMSCheckStep.from_dict(s) for s in data.get("steps") or []],
            active=bool(data.get("active", False)),
            contact_ids=list(data.get("contact_ids") or []),
            custom_message=data.get("custom_message") or "",
            integration_ids=list(data.get("integration_ids") or []),
            interval=data.get("interval") or 0,
            metadata=_metadata_from_dict(metadata) if metadata is not None else None,
            region=data.get("region") or "",
            send_notification_when_down=data.get("send_notification_when_down") or 0,
            severity_level=data.get("severity_level") or "",
            tags=list(data.get("tags") or []),
            team_ids=list(data.get("team_ids") or []),
        )

    def render_for_json_api(self) -> str:
        """Return the compact JSON body sent to the API."""
        return _marshal(self.to_dict())

    def validate(self) -> None:
        """Raise ValueError if any field holds a value the API would refuse."""
        if not self.name:
            raise ValueError("Invalid value for `Name`. Must contain non-empty string.")
        if not self.steps:
            raise ValueError("Invalid value for `Steps`. Must contain non-empty value.")
        if self.interval not in VALID_INTERVALS:
            raise ValueError(
                "Invalid value for `Interval`. Please provide one of the following "
                "valid values instead: [5 10 20 60 720 1440]."
            )
        if self.severity_level not in VALID_SEVERITY_LEVELS:
            raise ValueError(
                "Invalid value for `SeverityLevel`. Please provide one of the "
                "following valid values instead: [high,low]."
            )
        for tag in self.tags:
            found = _TAG_PATTERN.search(tag)
            if (found.group() if found else "") != tag:
                raise ValueError(
                    "Invalid value for `Tags`. The tag name may contain the "
                    "characters 'A-Z', 'a-z', '0-9', '_' and '-'."
                )