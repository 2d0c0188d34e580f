from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsShopStaff
from .models import Member
from .serializers import (
    MemberSerializer,
    MemberCreateSerializer,
    MemberUpdateSerializer,
)
from .services import (
    create_member,
    update_member,
    list_members,
    MemberNotFoundError,
    DuplicateEmailError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class MemberPagination(PageNumberPagination):
    """Custom pagination for members."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class MemberViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for loyalty members.

    list: Get all members (search by name, email, phone)
    create: Enrol a new member
    retrieve: Get a specific member with balance
    partial_update: Update contact details (balance is read-only)
    """

    queryset = Member.objects.all()
    serializer_class = MemberSerializer
    permission_classes = [IsShopStaff]
    pagination_class = MemberPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        """Filter members using the search query parameter."""
        search = self.request.query_params.get('search', '')
        return list_members(search=search)

    @extend_schema(
        request=MemberCreateSerializer,
        responses={201: MemberSerializer, 400: ErrorResponseSerializer},
        description="Enrol a new loyalty member with a zero balance.",
        tags=['members'],
    )
    def create(self, request):
        """Create member using service layer."""
        serializer = MemberCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            member = create_member(**serializer.validated_data)
        except DuplicateEmailError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=MemberUpdateSerializer,
        responses={
            200: MemberSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Update a member's name, email or phone.",
        tags=['members'],
    )
    def partial_update(self, request, pk=None):
        """Update member using service layer."""
        serializer = MemberUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            member = update_member(member_id=pk, **serializer.validated_data)
        except MemberNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateEmailError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(MemberSerializer(member).data)
