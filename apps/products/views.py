from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsShopStaff
from .models import Product
from .serializers import (
    ProductSerializer,
    ProductFilterSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
)
from .services import (
    create_product,
    update_product,
    list_products,
    get_categories,
    ProductNotFoundError,
    InvalidPriceError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ProductPagination(PageNumberPagination):
    """Custom pagination for the menu."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for menu items.

    list: Get the menu (filter by category, search)
    create: Add a menu item
    retrieve: Get a specific item
    partial_update: Edit an item
    categories: Distinct categories on the menu
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [IsShopStaff]
    pagination_class = ProductPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        """Filter products using input serializer validation."""
        filter_serializer = ProductFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_products(
            category=params.get('category', ''),
            search=params.get('search', ''),
        )

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer, 400: ErrorResponseSerializer},
        description="Add an item to the menu.",
        tags=['products'],
    )
    def create(self, request):
        """Create product using service layer."""
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = create_product(**serializer.validated_data)
        except InvalidPriceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ProductUpdateSerializer,
        responses={
            200: ProductSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Edit a menu item.",
        tags=['products'],
    )
    def partial_update(self, request, pk=None):
        """Update product using service layer."""
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = update_product(product_id=pk, **serializer.validated_data)
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidPriceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=['get'])
    def categories(self, request):
        """Get distinct menu categories."""
        return Response({'categories': get_categories()})
