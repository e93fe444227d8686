"""Active organization members managed through GraphQL."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .graphql import GraphQLExecutor, GraphQLRequest
from .invitations import Product
from .jsonutil import convert

LIST_ACTIVE_USER_OP = "getUsersQuery"
LIST_ACTIVE_USER_QUERY = "query getUsersQuery {\n  user {\n    id\n    currentOrganization {\n      id\n      members {\n        user {\n          id\n          firstName\n          lastName\n          email\n          lastLogin\n          __typename\n        }\n        role\n        products {\n          name\n          access\n          role\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
LIST_ACTIVE_USER_RESPONSE_TYPE = "user"

GET_ACTIVE_USER_OP = "getEditUserQuery"
GET_ACTIVE_USER_QUERY = "query getEditUserQuery($userId: String!) {\n  user {\n    id\n    currentOrganization {\n      id\n      members(filter: {id: $userId}) {\n        id\n        user {\n          email\n          __typename\n        }\n        role\n        products {\n          name\n          role\n          access\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
GET_ACTIVE_USER_RESPONSE_TYPE = "user"

UPDATE_ACTIVE_USER_OP = "updateMemberRolesMutation"
UPDATE_ACTIVE_USER_QUERY = "mutation updateMemberRolesMutation($userId: ID!, $role: OrganizationRole!, $products: [ProductAccessInput!]) {\n  updateMemberRoles(userId: $userId, input: {role: $role, products: $products}) {\n    code\n    success\n    message\n    __typename\n  }\n}\n"
UPDATE_ACTIVE_USER_RESPONSE_TYPE = "updateMemberRoles"


@dataclass
class UpdateActiveUserRequest:
    """New role and product access for an active member."""

    user_id: str = ""
    role: str = ""
    products: list[Product] = field(default_factory=list)
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the mutation variables; ``email`` is not sent."""
        return {
            "userId": self.user_id,
            "role": self.role,
            "products": [product.to_dict() for product in self.products],
        }


@dataclass
class ActiveUser:
    """A user account that has joined the organization."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    last_login: str = ""


@dataclass
class OrganizationMember:
    """An active user with their organization role and product access."""

    user: ActiveUser = field(default_factory=ActiveUser)
    role: str = ""
    products: list[Product] = field(default_factory=list)


@dataclass
class OrganizationWithMembers:
    """An organization and its active members."""

    id: str = ""
    members: list[OrganizationMember] = field(default_factory=list)


def _user_from_dict(data: dict[str, Any]) -> ActiveUser:
    return ActiveUser(
        id=data.get("id") or "",
        first_name=data.get("firstName") or "",
        last_name=data.get("lastName") or "",
        email=data.get("email") or "",
        last_login=data.get("lastLogin") or "",
    )


def _member_from_dict(data: dict[str, Any]) -> OrganizationMember:
    return OrganizationMember(
        user=_user_from_dict(data.get("user") or {}),
        role=data.get("role") or "",
        products=[Product.from_dict(p) for p in data.get("products") or []],
    )


@dataclass
class ActiveUserList:
    """The active members as seen by the signed-in user."""

    owner_user_id: str = ""
    organization: OrganizationWithMembers = field(
        default_factory=OrganizationWithMembers
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActiveUserList:
        org = data.get("currentOrganization") or {}
        return cls(
            owner_user_id=data.get("id") or "",
            organization=OrganizationWithMembers(
                id=org.get("id") or "",
                members=[_member_from_dict(m) for m in org.get("members") or []],
            ),
        )


class ActiveUserService:
    """Lists, reads and updates active organization members."""

    def __init__(self, executor: GraphQLExecutor) -> None:
        self.executor = executor

    def list(self) -> ActiveUserList:
        """Return all active members."""
        resp = self.executor.make_graphql_request(
            GraphQLRequest(
                LIST_ACTIVE_USER_OP,
                LIST_ACTIVE_USER_QUERY,
                None,
                LIST_ACTIVE_USER_RESPONSE_TYPE,
            )
        )
        return convert(resp, ActiveUserList)

    def get(self, user_id: str) -> ActiveUserList:
        """Return the member list filtered to ``user_id``."""
        resp = self.executor.make_graphql_request(
            GraphQLRequest(
                GET_ACTIVE_USER_OP,
                GET_ACTIVE_USER_QUERY,
                {"userId": user_id},
                GET_ACTIVE_USER_RESPONSE_TYPE,
            )
        )
        return convert(resp, ActiveUserList)

    def update(self, update: UpdateActiveUserRequest) -> None:
        """Change the role and product access of an active member."""
        self.executor.make_graphql_request(
            GraphQLRequest(
                UPDATE_ACTIVE_USER_OP,
                UPDATE_ACTIVE_USER_QUERY,
                update,
                UPDATE_ACTIVE_USER_RESPONSE_TYPE,
            )
        )

    def get_by_email(self, email: str) -> OrganizationMember | None:
        """Return the first active member with ``email``, or None."""
        members = self.list().organization.members
        return next((m for m in members if m.user.email == email), None)