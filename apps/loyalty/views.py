import logging

from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsShopStaff
from .serializers import (
    PurchaseInputSerializer,
    RedeemInputSerializer,
    EarnResultSerializer,
    RedeemResultSerializer,
    TransactionHistorySerializer,
    BalanceSummarySerializer,
)
from .services import (
    earn_points,
    redeem_points,
    list_transactions,
    reconcile_member,
    LoyaltyServiceError,
    NotFoundError,
    InvalidInputError,
    InsufficientBalanceError,
    StorageFailureError,
)

logger = logging.getLogger(__name__)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


ERROR_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (InsufficientBalanceError, status.HTTP_400_BAD_REQUEST),
    (StorageFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_response(error: LoyaltyServiceError) -> Response:
    """Map a loyalty service error to its HTTP response."""
    for error_class, status_code in ERROR_STATUS:
        if isinstance(error, error_class):
            return Response({'error': str(error)}, status=status_code)
    logger.error("Unmapped loyalty error: %r", error)
    return Response({'error': str(error)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@extend_schema(
    request=PurchaseInputSerializer,
    responses={
        201: EarnResultSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Record a purchase and credit the member with earned points (1 point per 50 spent).",
    tags=['loyalty'],
)
@api_view(['POST'])
@permission_classes([IsShopStaff])
def purchase(request):
    """Record a purchase and earn points."""
    serializer = PurchaseInputSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        result = earn_points(**serializer.validated_data)
    except LoyaltyServiceError as e:
        return error_response(e)

    return Response(EarnResultSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=RedeemInputSerializer,
    responses={
        201: RedeemResultSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Redeem points as a discount on a purchase (1 point = 1 currency unit).",
    tags=['loyalty'],
)
@api_view(['POST'])
@permission_classes([IsShopStaff])
def redeem(request):
    """Redeem points for a discount."""
    serializer = RedeemInputSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        result = redeem_points(**serializer.validated_data)
    except LoyaltyServiceError as e:
        return error_response(e)

    return Response(RedeemResultSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={
        200: TransactionHistorySerializer,
        404: ErrorResponseSerializer,
    },
    description="List a member's points transactions, newest first.",
    tags=['loyalty'],
)
@api_view(['GET'])
@permission_classes([IsShopStaff])
def member_transactions(request, member_id):
    """Get a member's transaction history."""
    try:
        entries = list_transactions(member_id=member_id)
    except LoyaltyServiceError as e:
        return error_response(e)

    return Response(TransactionHistorySerializer({
        'member_id': member_id,
        'count': len(entries),
        'transactions': entries,
    }).data)


@extend_schema(
    responses={
        200: BalanceSummarySerializer,
        404: ErrorResponseSerializer,
    },
    description="Get a member's balance together with the ledger total it must equal.",
    tags=['loyalty'],
)
@api_view(['GET'])
@permission_classes([IsShopStaff])
def member_balance(request, member_id):
    """Get a member's balance and reconciliation status."""
    try:
        summary = reconcile_member(member_id=member_id)
    except LoyaltyServiceError as e:
        return error_response(e)

    return Response(BalanceSummarySerializer(summary).data)
