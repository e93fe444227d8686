import json

import pytest

from pingkit.active_users import ActiveUserService
from pingkit.errors import ClientError, ErrorCode
from pingkit.graphql import GraphQLExecutor
from pingkit.invitations import Invitation, InvitationService, Product
from pingkit.jsonutil import rand_string
from pingkit.users import UserService

ACTIVE_USER_EMAIL = "active@example.com"
ACTIVE_USER_ID = "3000000000000000003"
NON_EXIST_USER_EMAIL = "nobody@example.com"
PENDING_USER_EMAIL = "pending@example.com"

LIST_ACTIVE = {
    "data": {
        "user": {
            "id": "1000000000000000001",
            "currentOrganization": {
                "id": "2000000000000000002",
                "members": [
                    {
                        "user": {
                            "id": ACTIVE_USER_ID,
                            "firstName": "IT",
                            "lastName": "Team",
                            "email": ACTIVE_USER_EMAIL,
                            "lastLogin": "2021-03-23T07:17:48Z",
                        },
                        "role": "ADMIN",
                        "products": [
                            {"name": "PINGDOM", "access": True, "role": "ADMIN"}
                        ],
                    },
                    {
                        "user": {
                            "id": "4000000000000000004",
                            "firstName": "Ops",
                            "lastName": "Tooling",
                            "email": "tooling@example.com",
                            "lastLogin": "2021-03-24T23:04:56Z",
                        },
                        "role": "ADMIN",
                        "products": [],
                    },
                ],
            },
        }
    }
}

LIST_INVITATIONS = {
    "data": {
        "user": {
            "id": "1000000000000000001",
            "currentOrganization": {
                "id": "2000000000000000002",
                "invitations": [
                    {
                        "email": PENDING_USER_EMAIL,
                        "role": "MEMBER",
                        "date": "2021-03-25T02:36:48Z",
                        "products": [
                            {"name": "APPOPTICS", "role": "MEMBER", "access": True}
                        ],
                    },
                    {
                        "email": "other@example.com",
                        "role": "MEMBER",
                        "date": "2021-03-25T02:37:25Z",
                        "products": [],
                    },
                ],
            },
        }
    }
}


def _ok(key):
    return {"data": {key: {"success": True, "code": "200", "message": ""}}}


RESPONSES = {
    "getUsersQuery": LIST_ACTIVE,
    "getInvitationsQuery": LIST_INVITATIONS,
    "updateMemberRolesMutation": _ok("updateMemberRoles"),
    "deleteOrganizationInvitationMutation": _ok("deleteOrganizationInvitation"),
    "createOrganizationAdminMutation": _ok("createOrganizationInvitation"),
}


class FakeServer:
    def __init__(self):
        self.requests = []

    def __call__(self, payload):
        req = json.loads(payload)
        self.requests.append(req)
        op = req["operationName"]
        if op == "deleteOrganizationInvitationMutation" and (
            req["variables"]["email"] != PENDING_USER_EMAIL
        ):
            return json.dumps(
                {
                    "data": {
                        "deleteOrganizationInvitation": {
                            "success": False,
                            "code": "500",
                            "message": "user not exist",
                        }
                    }
                }
            )
        return json.dumps(RESPONSES[op])

    def ops(self):
        return [r["operationName"] for r in self.requests]


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def users(server):
    executor = GraphQLExecutor(server)
    return UserService(ActiveUserService(executor), InvitationService(executor))


def test_retrieve_active_user(users):
    user = users.retrieve(ACTIVE_USER_EMAIL)
    assert user == Invitation(ACTIVE_USER_EMAIL, "ADMIN", [Product("PINGDOM", "ADMIN")])


def test_retrieve_missing_user(users):
    assert users.retrieve(NON_EXIST_USER_EMAIL) is None


def test_retrieve_pending_user(users, server):
    user = users.retrieve(PENDING_USER_EMAIL)
    assert user == Invitation(
        PENDING_USER_EMAIL, "MEMBER", [Product("APPOPTICS", "MEMBER")]
    )
    assert server.ops() == ["getUsersQuery", "getInvitationsQuery"]


def test_create_user(users, server):
    invitation = Invitation(
        email=rand_string(8) + "@example.com",
        role="Member",
        products=[Product("AppOptics", "Admin"), Product("Loggly", "User")],
    )
    assert users.create(invitation) is None
    (req,) = server.requests
    assert req["operationName"] == "createOrganizationAdminMutation"
    assert req["variables"] == {"input": invitation.to_dict()}


def test_update_active_user(users, server):
    update = Invitation(ACTIVE_USER_EMAIL, "ADMIN", [Product("APPOPTICS", "MEMBER")])
    assert users.update(update) is None
    assert server.ops() == ["getUsersQuery", "updateMemberRolesMutation"]
    variables = server.requests[1]["variables"]
    assert variables["userId"] == ACTIVE_USER_ID
    assert variables["role"] == "ADMIN"
    assert variables["products"] == [{"name": "APPOPTICS", "role": "MEMBER"}]


def test_update_missing_user(users):
    update = Invitation(NON_EXIST_USER_EMAIL, "ADMIN", [Product("APPOPTICS", "MEMBER")])
    with pytest.raises(LookupError, match=NON_EXIST_USER_EMAIL):
        users.update(update)


def test_update_pending_user(users, server):
    update = Invitation(PENDING_USER_EMAIL, "ADMIN", [Product("APPOPTICS", "MEMBER")])
    assert users.update(update) is None
    assert server.ops() == [
        "getUsersQuery",
        "getInvitationsQuery",
        "deleteOrganizationInvitationMutation",
        "createOrganizationAdminMutation",
    ]
    assert server.requests[-1]["variables"]["input"] == {
        "email": PENDING_USER_EMAIL,
        "role": "ADMIN",
        "products": [{"name": "APPOPTICS", "role": "MEMBER"}],
    }


def test_delete_pending_user(users, server):
    assert users.delete(PENDING_USER_EMAIL) is None
    assert server.ops() == ["getUsersQuery", "deleteOrganizationInvitationMutation"]
    assert server.requests[-1]["variables"] == {"email": PENDING_USER_EMAIL}


def test_delete_active_user(users):
    with pytest.raises(ClientError) as info:
        users.delete(ACTIVE_USER_EMAIL)
    assert info.value.status_code == ErrorCode.DELETE_ACTIVE_USER_EXCEPTION


def test_delete_missing_user(users):
    with pytest.raises(ClientError) as info:
        users.delete(NON_EXIST_USER_EMAIL)
    assert info.value.status_code == ErrorCode.NETWORK_EXCEPTION
    assert "user not exist" in str(info.value)