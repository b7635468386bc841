from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shelter import __version__
from health.checks import check_database, readiness


class HealthProbeView(APIView):
    """Unauthenticated, unthrottled probe endpoint."""

    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = []


class LiveView(HealthProbeView):
    """Liveness probe: process is running. No DB or external deps."""

    def get(self, request):
        return Response({"status": "alive"})


class ReadyView(HealthProbeView):
    """Readiness probe: DB, cache, migrations, workflow tables. 503 until ready."""

    def get(self, request):
        ready, checks = readiness()
        return Response(
            {"status": "ready" if ready else "not_ready", "checks": checks},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )


class HealthSummaryView(HealthProbeView):
    """Database connectivity plus the running version."""

    def get(self, request):
        connected = check_database() == "ok"
        return Response(
            {
                "status": "ok" if connected else "unhealthy",
                "database": "connected" if connected else "disconnected",
                "version": __version__,
            },
            status=status.HTTP_200_OK if connected else status.HTTP_503_SERVICE_UNAVAILABLE,
        )
