"""Organization invitations managed through GraphQL."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .graphql import GraphQLExecutor, GraphQLRequest
from .jsonutil import convert

INVITE_USER_OP = "createOrganizationAdminMutation"
INVITE_USER_QUERY = "mutation createOrganizationAdminMutation($input: CreateOrganizationInvitationInput!) {\n  createOrganizationInvitation(input: $input) {\n    success\n    code\n    message\n    invitation {\n      email\n      role\n      __typename\n    }\n    __typename\n  }\n}\n"
INVITE_USER_RESPONSE_TYPE = "createOrganizationInvitation"

REVOKE_INVITATION_OP = "deleteOrganizationInvitationMutation"
REVOKE_INVITATION_QUERY = "mutation deleteOrganizationInvitationMutation($email: ID!) {\n  deleteOrganizationInvitation(email: $email) {\n    success\n    code\n    message\n    __typename\n  }\n}\n"
REVOKE_INVITATION_RESPONSE_TYPE = "deleteOrganizationInvitation"

RESEND_INVITATION_OP = "resendOrganizationInvitationMutation"
RESEND_INVITATION_QUERY = "mutation resendOrganizationInvitationMutation($email: ID!) {\n  resendOrganizationInvitation(email: $email) {\n    success\n    code\n    message\n    __typename\n  }\n}\n"
RESEND_INVITATION_RESPONSE_TYPE = "resendOrganizationInvitation"

LIST_INVITATION_OP = "getInvitationsQuery"
LIST_INVITATION_QUERY = "query getInvitationsQuery {\n  user {\n    id\n    currentOrganization {\n      id\n      invitations {\n        email\n        role\n        date\n        products {\n          name\n          role\n          access\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
LIST_INVITATION_RESPONSE_TYPE = "user"


@dataclass
class Product:
    """A product and the role a user holds in it."""

    name: str = ""
    role: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "role": self.role}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        return cls(name=data.get("name") or "", role=data.get("role") or "")


@dataclass
class Invitation:
    """An invitation of a user into the organization."""

    email: str = ""
    role: str = ""
    products: list[Product] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "role": self.role,
            "products": [product.to_dict() for product in self.products],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Invitation:
        return cls(
            email=data.get("email") or "",
            role=data.get("role") or "",
            products=[Product.from_dict(p) for p in data.get("products") or []],
        )


@dataclass
class OrganizationWithInvitations:
    """An organization and its pending invitations."""

    id: str = ""
    invitations: list[Invitation] = field(default_factory=list)


@dataclass
class InvitationList:
    """The pending invitations as seen by the signed-in user."""

    owner_user_id: str = ""
    organization: OrganizationWithInvitations = field(
        default_factory=OrganizationWithInvitations
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InvitationList:
        org = data.get("currentOrganization") or {}
        return cls(
            owner_user_id=data.get("id") or "",
            organization=OrganizationWithInvitations(
                id=org.get("id") or "",
                invitations=[
                    Invitation.from_dict(i) for i in org.get("invitations") or []
                ],
            ),
        )


class InvitationService:
    """Creates, revokes, resends and lists invitations."""

    def __init__(self, executor: GraphQLExecutor) -> None:
        self.executor = executor

    def create(self, invitation: Invitation) -> None:
        """Invite a new user."""
        self.executor.make_graphql_request(
            GraphQLRequest(
                INVITE_USER_OP,
                INVITE_USER_QUERY,
                {"input": invitation.to_dict()},
                INVITE_USER_RESPONSE_TYPE,
            )
        )

    def revoke(self, email: str) -> None:
        """Revoke the pending invitation for ``email``."""
        self.executor.make_graphql_request(
            GraphQLRequest(
                REVOKE_INVITATION_OP,
                REVOKE_INVITATION_QUERY,
                {"email": email},
                REVOKE_INVITATION_RESPONSE_TYPE,
            )
        )

    def resend(self, email: str) -> None:
        """Send the invitation for ``email`` again."""
        self.executor.make_graphql_request(
            GraphQLRequest(
                RESEND_INVITATION_OP,
                RESEND_INVITATION_QUERY,
                {"email": email},
                RESEND_INVITATION_RESPONSE_TYPE,
            )
        )

    def list(self) -> InvitationList:
        """Return all pending invitations."""
        resp = self.executor.make_graphql_request(
            GraphQLRequest(
                LIST_INVITATION_OP,
                LIST_INVITATION_QUERY,
                None,
                LIST_INVITATION_RESPONSE_TYPE,
            )
        )
        return convert(resp, InvitationList)