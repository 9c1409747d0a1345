from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    ProfileSerializer,
    ProfileCardSerializer,
    ProfileUpsertSerializer,
    DiscoverQuerySerializer,
)
from .services import (
    upsert_profile,
    get_profile_for_user,
    get_profile_by_id,
    get_candidates_for_user,
    # Exceptions
    ProfileNotFoundError,
    InvalidProfileError,
)


@extend_schema(
    methods=['GET'],
    responses={200: ProfileSerializer},
    description="Get the current user's own profile.",
    tags=['profiles'],
)
@extend_schema(
    methods=['PUT'],
    request=ProfileUpsertSerializer,
    responses={200: ProfileSerializer},
    description="Create or fully replace the current user's profile.",
    tags=['profiles'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def my_profile(request):
    """Get or save the current user's profile - thin HTTP handler."""
    if request.method == 'GET':
        try:
            profile = get_profile_for_user(user=request.user)
        except ProfileNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProfileSerializer(profile).data)

    serializer = ProfileUpsertSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        profile = upsert_profile(user=request.user, **serializer.validated_data)
    except InvalidProfileError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ProfileSerializer(profile).data)


@extend_schema(
    responses={200: ProfileCardSerializer},
    description="Get a single profile card.",
    tags=['profiles'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile_detail(request, profile_id):
    """Get a profile by ID."""
    try:
        profile = get_profile_by_id(profile_id=profile_id)
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(ProfileCardSerializer(profile).data)


@extend_schema(
    parameters=[
        OpenApiParameter('limit', OpenApiTypes.INT, description='Batch size (1-50)'),
    ],
    responses={200: ProfileCardSerializer(many=True)},
    description="Get a batch of discovery candidates matching the user's seeking preference.",
    tags=['profiles'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def discover(request):
    """Discovery batch - thin HTTP handler."""
    query_serializer = DiscoverQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    candidates = get_candidates_for_user(
        user=request.user,
        limit=query_serializer.validated_data.get('limit'),
    )
    return Response(ProfileCardSerializer(candidates, many=True).data)
