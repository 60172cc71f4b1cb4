from rest_framework import permissions


class HasRole(permissions.BasePermission):
    """
    Endpoint-level role gate.

    Views declare ``allowed_roles`` (either a collection applied to every
    method, or a dict keyed by HTTP method). A view or method without an
    entry only requires an authenticated user.
    """

    message = "You are not allowed to do this."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        allowed = getattr(view, "allowed_roles", None)
        if isinstance(allowed, dict):
            allowed = allowed.get(request.method)
        if not allowed:
            return True

        return user.role in allowed
