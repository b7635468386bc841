"""
Adoption API views.

All mutations flow through the service layer.
All endpoints define permission_classes per API contract.
"""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response

from shelter.exceptions import PermissionDeniedError
from shelter.permissions import IsAdopter, IsAnyRole, IsStaffOrAdmin
from apps.adoptions import services
from apps.adoptions.serializers import (
    AdoptionRequestSerializer,
    CancelRequestSerializer,
    ProcessRequestSerializer,
    SubmitRequestSerializer,
)


def _paginated(request, queryset):
    paginator = LimitOffsetPagination()
    paginator.default_limit = 50
    paginator.max_limit = 100

    page = paginator.paginate_queryset(queryset, request)
    serializer = AdoptionRequestSerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)


def _success(message, data, status_code=status.HTTP_200_OK):
    return Response(
        {"success": True, "message": message, "data": data}, status=status_code
    )


@api_view(["POST", "GET"])
@permission_classes([IsAnyRole])
def create_or_list_adoptions(request):
    """
    POST /api/v1/adoptions - Submit an adoption request (adopters only)
    GET /api/v1/adoptions - List adoption requests
    """
    if request.method == "POST":
        if not IsAdopter().has_permission(request, None):
            raise PermissionDeniedError("Only adopters can submit adoption requests")

        serializer = SubmitRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        adoption = services.submit_request(
            serializer.validated_data["animal_id"], request.user.id, request=request
        )
        return _success(
            "Adoption request submitted",
            AdoptionRequestSerializer(adoption).data,
            status.HTTP_201_CREATED,
        )

    params = request.query_params
    queryset = services.list_requests(
        request.user,
        status=params.get("status"),
        animal_id=params.get("animal_id"),
        adopter_id=params.get("adopter_id"),
        search=params.get("search"),
    )
    return _paginated(request, queryset)


@api_view(["GET"])
@permission_classes([IsAnyRole])
def get_adoption(request, requestId):
    """
    GET /api/v1/adoptions/{requestId}
    """
    adoption = services.get_request(requestId, request.user)
    return _success("Adoption request retrieved", AdoptionRequestSerializer(adoption).data)


@api_view(["PUT"])
@permission_classes([IsStaffOrAdmin])
def process_adoption(request, requestId):
    """
    PUT /api/v1/adoptions/{requestId}/process

    Body: status, comments (optional), interview_date (required when
    status is Interview Scheduled).
    """
    serializer = ProcessRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    adoption = services.process_request(
        requestId,
        data["status"],
        request.user.id,
        comments=data.get("comments"),
        interview_date=data.get("interview_date"),
        request=request,
    )
    return _success("Adoption request processed", AdoptionRequestSerializer(adoption).data)


@api_view(["PUT"])
@permission_classes([IsAnyRole])
def cancel_adoption(request, requestId):
    """
    PUT /api/v1/adoptions/{requestId}/cancel
    """
    serializer = CancelRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    adoption = services.cancel_request(
        requestId,
        request.user,
        comments=serializer.validated_data.get("comments"),
        request=request,
    )
    return _success("Adoption request cancelled", AdoptionRequestSerializer(adoption).data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def adoption_statistics(request):
    """
    GET /api/v1/adoptions/stats/summary
    """
    return _success("Adoption statistics", services.get_statistics())


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def animal_adoption_history(request, animalId):
    """
    GET /api/v1/adoptions/animal/{animalId}
    """
    return _paginated(request, services.animal_history(animalId))


@api_view(["GET"])
@permission_classes([IsAnyRole])
def adopter_adoption_history(request, userId):
    """
    GET /api/v1/adoptions/user/{userId}

    Adopters may only read their own history.
    """
    if not IsStaffOrAdmin().has_permission(request, None) and request.user.id != userId:
        raise PermissionDeniedError("You can only view your own adoption history")
    return _paginated(request, services.adopter_history(userId))
