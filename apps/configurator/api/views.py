from rest_framework import viewsets, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db.models import Prefetch

from apps.configurator.models import (
    Product,
    AttributeType,
    AttributeValue,
    Color,
    Size,
    Variant,
)
from apps.configurator.services import DimensionReader, build_identity_key
from apps.configurator.services.loader import VariantPayloadLoader, build_configurator
from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    AttributeTypeSerializer,
    AttributeValueSerializer,
    ColorSerializer,
    SizeSerializer,
    VariantListSerializer,
    VariantDetailSerializer,
    ConfiguratorQuerySerializer,
)
from .filters import VariantFilter


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products.

    list: List all products
    retrieve: Get product detail with variants
    configurator: Resolve a selection and report option availability
    """
    queryset = Product.objects.all()
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductListSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related(
                Prefetch(
                    'variants',
                    queryset=Variant.objects.filter(
                        status=Variant.STATUS_ACTIVE
                    ).select_related('color').prefetch_related(
                        'variantsize_set__size',
                        'variantattribute_set__attribute_value__attribute_type'
                    )
                )
            )
        return queryset

    @action(detail=True, methods=['get'])
    def configurator(self, request, slug=None):
        """
        Option controls, availability and the resolved variant for a selection.

        Query params:
        - Any attribute_slug=token pairs (e.g., ?color=Red&size=Small)
        - selection_key: 'label' (default) or 'id'
        """
        product = self.get_object()

        query = ConfiguratorQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        exclude_params = ['selection_key', 'format']
        selection = {
            k: v for k, v in request.query_params.items()
            if k not in exclude_params
        }

        configurator = build_configurator(
            product,
            selection=selection,
            selection_key=query.validated_data.get('selection_key'),
            request=request,
        )
        return Response(configurator.as_dict())


class AttributeTypeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for attribute types (Storage, Material, etc).
    """
    queryset = AttributeType.objects.prefetch_related('values')
    serializer_class = AttributeTypeSerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['priority', 'name']


class AttributeValueViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for attribute values.
    """
    queryset = AttributeValue.objects.select_related('attribute_type')
    serializer_class = AttributeValueSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['attribute_type', 'attribute_type__slug', 'role']
    search_fields = ['label', 'slug']


class ColorViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Color.objects.all()
    serializer_class = ColorSerializer
    filter_backends = [filters.SearchFilter]
    search_fields = ['name']


class SizeViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Size.objects.all()
    serializer_class = SizeSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['category']
    search_fields = ['name']


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, status, stock and dimensions.
    """
    queryset = Variant.objects.select_related('product', 'color').prefetch_related(
        'images',
        'variantsize_set__size',
        'variantattribute_set__attribute_value__attribute_type',
    )
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'product__name']
    ordering_fields = ['sku', 'price', 'stock', 'created_at']
    ordering = ['sku']

    def get_serializer_class(self):
        if self.action == 'list':
            return VariantListSerializer
        return VariantDetailSerializer

    @action(detail=True, methods=['get'])
    def identity(self, request, pk=None):
        """Canonical identity key of a variant."""
        variant = self.get_object()
        loader = VariantPayloadLoader(request)
        reader = DimensionReader(loader.load_attribute_types())
        key = build_identity_key(loader.variant_payload(variant), reader)
        return Response({
            'id': variant.id,
            'sku': variant.sku,
            'identity_key': key,
        })
