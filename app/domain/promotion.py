"""User role promotion rule.

Roles: user → member. Admin is granted out of band only and members are
lowered by the explicit downgrade operation, never by this rule.
"""

ROLE_USER = "user"
ROLE_MEMBER = "member"
ROLE_ADMIN = "admin"

USER_ROLES = frozenset({ROLE_USER, ROLE_MEMBER, ROLE_ADMIN})

DEFAULT_ROLE = ROLE_USER

PROMOTIONS = {
    ROLE_USER: ROLE_MEMBER,
}


def promotion_target(role: str) -> str | None:
    """Return the role an approved booking promotes ``role`` to, if any."""
    return PROMOTIONS.get(role)
