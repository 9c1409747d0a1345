from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.profiles.services import ProfileNotFoundError
from .serializers import MatchSerializer, RecordInterestSerializer
from .services import (
    record_interest,
    list_matches,
    get_match_for_user,
    # Exceptions
    MatchNotFoundError,
    NotMatchOwnerError,
    AlreadyMatchedError,
    ProfileRequiredError,
    SelfMatchError,
    IncompatibleCandidateError,
)


@extend_schema(
    methods=['GET'],
    responses={200: MatchSerializer(many=True)},
    description="List the current user's matches, newest first.",
    tags=['matches'],
)
@extend_schema(
    methods=['POST'],
    request=RecordInterestSerializer,
    responses={201: MatchSerializer},
    description="Like a profile. The match is created immediately; no reciprocity is required.",
    tags=['matches'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def match_list(request):
    """List matches or record interest - thin HTTP handler."""
    if request.method == 'GET':
        matches = list_matches(user=request.user)
        return Response(MatchSerializer(matches, many=True).data)

    serializer = RecordInterestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        match = record_interest(
            user=request.user,
            profile_id=serializer.validated_data['profile_id'],
        )
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except AlreadyMatchedError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except (ProfileRequiredError, SelfMatchError, IncompatibleCandidateError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(MatchSerializer(match).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: MatchSerializer},
    description="Get one of the current user's matches.",
    tags=['matches'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def match_detail(request, match_id):
    try:
        match = get_match_for_user(match_id=match_id, user=request.user)
    except MatchNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotMatchOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(MatchSerializer(match).data)
