from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.credits.serializers import AddCreditsSerializer
from apps.credits.services import (
    add_credits as add_credits_service,
    AccountNotFoundError,
    InvalidCreditAmountError,
    InsufficientPermissionsError,
)
from .permissions import IsAppAdmin
from .queries import DashboardQueries
from .serializers import (
    DashboardStatsSerializer,
    UserOverviewSerializer,
    AddCreditsResponseSerializer,
    HomeSummarySerializer,
)


@extend_schema(
    responses={200: DashboardStatsSerializer},
    description="Platform totals for the admin dashboard.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAppAdmin])
def dashboard(request):
    data = DashboardQueries.dashboard_stats()
    return Response(DashboardStatsSerializer(data).data)


@extend_schema(
    responses={200: UserOverviewSerializer(many=True)},
    description="Per-user credits, matches and messages.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAppAdmin])
def user_list(request):
    rows = DashboardQueries.user_overview()
    return Response(UserOverviewSerializer(rows, many=True).data)


@extend_schema(
    request=AddCreditsSerializer,
    responses={200: AddCreditsResponseSerializer},
    description="Top up a user's credits.",
    tags=['dashboard'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAppAdmin])
def add_credits(request):
    """Admin top-up - thin HTTP handler."""
    serializer = AddCreditsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user_id = serializer.validated_data['user_id']
    amount = serializer.validated_data['amount']

    try:
        balance = add_credits_service(user_id=user_id, amount=amount, added_by=request.user)
    except AccountNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidCreditAmountError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({'user_id': user_id, 'amount': amount, 'balance': balance})


@extend_schema(
    responses={200: HomeSummarySerializer},
    description="The current user's matches, messages and credits, with featured profiles.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def home(request):
    data = DashboardQueries.home_summary(request.user)
    return Response(HomeSummarySerializer(data).data)
