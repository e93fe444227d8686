"""Integration (alerting webhook) definitions and API response records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .jsonutil import _marshal

VALID_PROVIDER_IDS = frozenset({1, 2})


@dataclass
class IntegrationProvider:
    """An integration provider offered by the API."""

    id: int = 0
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationProvider:
        return cls(
            id=data.get("id") or 0,
            name=data.get("name") or "",
            description=data.get("description") or "",
        )


@dataclass
class WebHookData:
    """User data of a webhook integration."""

    name: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url}


@dataclass
class WebHookIntegration:
    """A webhook integration to create or update."""

    active: bool = False
    provider_id: int = 0
    user_data: WebHookData | None = None

    def post_params(self) -> dict[str, str]:
        """Return the request parameters for this integration."""
        return {
            "active": "true" if self.active else "false",
            "provider_id": str(self.provider_id),
            "data_json": _marshal(self.user_data),
        }

    def validate(self) -> None:
        """Raise ValueError if the integration cannot be sent to the API."""
        if self.provider_id not in VALID_PROVIDER_IDS:
            raise ValueError(
                "Invalid value for `provider`.  Must contain available provider id"
            )
        data = self.user_data or WebHookData()
        if not data.name:
            raise ValueError("Invalid value for `name`.  Must contain non-empty string")
        if not data.url:
            raise ValueError("Invalid value for `url`.  Must contain non-empty string")


@dataclass
class IntegrationGetResponse:
    """An integration as returned by the API."""

    number_of_connected_checks: int = 0
    id: int = 0
    name: str = ""
    description: str = ""
    provider_id: int = 0
    activated_at: int = 0
    created_at: int = 0
    user_data: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationGetResponse:
        return cls(
            number_of_connected_checks=data.get("number_of_connected_checks") or 0,
            id=data.get("id") or 0,
            name=data.get("name") or "",
            description=data.get("description") or "",
            provider_id=data.get("provider_id") or 0,
            activated_at=data.get("activated_at") or 0,
            created_at=data.get("created_at") or 0,
            user_data=dict(data.get("user_data") or {}),
        )


@dataclass
class IntegrationStatus:
    """The outcome of an integration change."""

    id: int = 0
    status: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationStatus:
        return cls(id=data.get("id") or 0, status=bool(data.get("status", False)))