"""Role-based permissions for authenticated principals."""

from rest_framework.permissions import BasePermission

ORGANIZER_ROLES = ("organizer", "admin")
SCANNER_ROLES = ("ticket_checker", "organizer", "admin")


def role_required(*roles: str) -> type[BasePermission]:
    """Build a permission class admitting only the given roles."""

    class HasRole(BasePermission):
        message = f"This resource is restricted to: {', '.join(roles)}."

        def has_permission(self, request, view) -> bool:
            user = request.user
            return bool(user and user.is_authenticated and user.role in roles)

    HasRole.__name__ = f"HasRole[{'|'.join(roles)}]"
    return HasRole
