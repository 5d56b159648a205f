"""Utility for resolving user names to IDs."""

from splitledger.domain.user import UserService


def resolve_user(user_service: UserService, user: str) -> str:
    """Resolve a user ID or display name to a user ID.

    An exact ID match wins over a name match. Names are compared
    case-insensitively and must be unambiguous.

    Args:
        user_service: UserService instance
        user: User ID or display name

    Returns:
        User ID

    Raises:
        ValueError: If no user matches or the name matches several users
    """
    if user_service.get_user(user) is not None:
        return user

    wanted = user.strip().lower()
    matches = [u for u in user_service.list_users() if u.name.lower() == wanted]
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        ids = ", ".join(u.id for u in matches)
        raise ValueError(f"User name '{user}' is ambiguous (matches {ids}); use the user id")

    raise ValueError(f"User '{user}' not found")
