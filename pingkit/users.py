"""User management over active members and pending invitations."""

from __future__ import annotations

import logging

from .active_users import ActiveUserService, OrganizationMember, UpdateActiveUserRequest
from .errors import attempt_delete_active_user_error, network_error
from .invitations import Invitation, InvitationService

log = logging.getLogger(__name__)

User = Invitation


class UserService:
    """Treats active members and pending invitations as one set of users."""

    def __init__(
        self, active_users: ActiveUserService, invitations: InvitationService
    ) -> None:
        self.active_users = active_users
        self.invitations = invitations

    def _find_active(self, email: str) -> OrganizationMember | None:
        # A failed lookup is treated as "not an active user".
        try:
            return self.active_users.get_by_email(email)
        except Exception as exc:  # noqa: BLE001
            log.debug("active user lookup for %s failed: %s", email, exc)
            return None

    def create(self, user: User) -> None:
        """Invite a new user; users can only join through an invitation."""
        self.invitations.create(user)

    def update(self, update: User) -> None:
        """Update an active member, or replace a pending invitation.

        Raises LookupError if the e-mail is neither an active member nor
        invited.
        """
        active = self._find_active(update.email)
        if active is not None:
            self.active_users.update(
                UpdateActiveUserRequest(
                    user_id=active.user.id,
                    role=update.role,
                    products=list(update.products),
                )
            )
            return

        log.info("Will revoke the invitation and send a new one for user: %s", update.email)
        invitation_list = self.invitations.list()
        found = False
        for invitation in invitation_list.organization.invitations:
            if invitation.email == update.email:
                found = True
                self.invitations.revoke(update.email)
        if not found:
            raise LookupError(f"there is no invitation with email: {update.email}")
        self.invitations.create(
            Invitation(
                email=update.email, role=update.role, products=list(update.products)
            )
        )

    def delete(self, email: str) -> None:
        """Revoke a pending invitation; active members cannot be deleted."""
        if self._find_active(email) is not None:
            raise attempt_delete_active_user_error(email)
        try:
            self.invitations.revoke(email)
        except Exception as exc:
            raise network_error(exc) from exc

    def retrieve(self, email: str) -> User | None:
        """Return the user with ``email``, active or invited, or None."""
        active = self.active_users.get_by_email(email)
        if active is not None:
            return User(email=email, role=active.role, products=list(active.products))

        log.info("user %s is not found in active user list, will look up in invitations", email)
        invitation_list = self.invitations.list()
        return next(
            (i for i in invitation_list.organization.invitations if i.email == email),
            None,
        )