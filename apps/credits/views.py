from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .models import CreditEntry
from .serializers import CreditBalanceSerializer, CreditEntrySerializer
from .services import ensure_account


class CreditEntryPagination(PageNumberPagination):
    """Pagination for ledger history."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


@extend_schema(
    responses={200: CreditBalanceSerializer},
    description="Get the current user's credit balance.",
    tags=['credits'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_balance(request):
    """Get current balance - thin HTTP handler."""
    account = ensure_account(user=request.user)
    return Response(CreditBalanceSerializer(account).data)


@extend_schema(
    responses={200: CreditEntrySerializer(many=True)},
    description="Get the current user's credit history, newest first.",
    tags=['credits'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_entries(request):
    """Ledger history for the current user."""
    entries = CreditEntry.objects.filter(account__user=request.user).order_by('-created_at')

    paginator = CreditEntryPagination()
    page = paginator.paginate_queryset(entries, request)
    serializer = CreditEntrySerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)
