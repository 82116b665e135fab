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

__all__ = [
    'ProductListSerializer',
    'ProductDetailSerializer',
    'AttributeTypeSerializer',
    'AttributeValueSerializer',
    'ColorSerializer',
    'SizeSerializer',
    'VariantListSerializer',
    'VariantDetailSerializer',
    'ConfiguratorQuerySerializer',
]
