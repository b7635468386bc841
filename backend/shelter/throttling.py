from rest_framework.throttling import AnonRateThrottle, UserRateThrottle

MUTATING_METHODS = ("POST", "PUT", "PATCH", "DELETE")


class MutationUserThrottle(UserRateThrottle):
    """Per-user limit on writes; reads are never counted."""

    scope = "mutation_user"

    def allow_request(self, request, view):
        if request.method not in MUTATING_METHODS:
            return True
        return super().allow_request(request, view)


class LoginThrottle(AnonRateThrottle):
    """Login attempts per client address and submitted username."""

    scope = "login"

    def get_cache_key(self, request, view):
        data = request.data if isinstance(request.data, dict) else {}
        username = str(data.get("username", "")).strip().lower()
        return self.cache_format % {
            "scope": self.scope,
            "ident": f"{self.get_ident(request)}:{username}",
        }
