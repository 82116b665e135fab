from rest_framework import serializers
from apps.configurator.models import (
    Product,
    AttributeType,
    AttributeValue,
    Color,
    Size,
    Variant,
    VariantAttribute,
    VariantSize,
    VariantImage,
)


# =============================================================================
# Attribute Serializers
# =============================================================================

class AttributeValueSerializer(serializers.ModelSerializer):
    attribute_type_name = serializers.CharField(
        source='attribute_type.name', read_only=True
    )
    attribute_type_slug = serializers.CharField(
        source='attribute_type.slug', read_only=True
    )
    token = serializers.CharField(read_only=True)

    class Meta:
        model = AttributeValue
        fields = [
            'id', 'attribute_type', 'attribute_type_name', 'attribute_type_slug',
            'label', 'slug', 'token', 'role', 'hex_code', 'display_order'
        ]


class AttributeTypeSerializer(serializers.ModelSerializer):
    values = AttributeValueSerializer(many=True, read_only=True)

    class Meta:
        model = AttributeType
        fields = ['id', 'name', 'slug', 'input_type', 'priority', 'values']


class ColorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Color
        fields = ['id', 'name', 'hex_code', 'display_order']


class SizeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Size
        fields = ['id', 'name', 'category', 'display_order']


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantImageSerializer(serializers.ModelSerializer):
    thumbnail_url = serializers.SerializerMethodField()

    class Meta:
        model = VariantImage
        fields = ['id', 'image', 'thumbnail_url', 'alt_text', 'display_order', 'is_primary']

    def get_thumbnail_url(self, obj):
        if obj.thumbnail:
            request = self.context.get('request')
            if request:
                return request.build_absolute_uri(obj.thumbnail.url)
            return obj.thumbnail.url
        return None


class VariantSizeSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='size.name', read_only=True)

    class Meta:
        model = VariantSize
        fields = ['size', 'name', 'category']


class VariantAttributeSerializer(serializers.ModelSerializer):
    attribute_slug = serializers.CharField(
        source='attribute_value.attribute_type.slug', read_only=True
    )
    label = serializers.CharField(source='attribute_value.label', read_only=True)
    token = serializers.CharField(source='attribute_value.token', read_only=True)
    role = serializers.CharField(source='attribute_value.role', read_only=True)

    class Meta:
        model = VariantAttribute
        fields = ['attribute_value', 'attribute_slug', 'label', 'token', 'role']


class VariantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for variant lists."""
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    attributes = serializers.SerializerMethodField()
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'product', 'product_slug', 'status',
            'price', 'stock', 'is_in_stock', 'attributes'
        ]

    def get_attributes(self, obj):
        return obj.get_options_dict()


class VariantDetailSerializer(serializers.ModelSerializer):
    """Full variant serializer with all dimensions."""
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    color = ColorSerializer(read_only=True)
    sizes = VariantSizeSerializer(source='variantsize_set', many=True, read_only=True)
    variant_attributes = VariantAttributeSerializer(
        source='variantattribute_set', many=True, read_only=True
    )
    images = VariantImageSerializer(many=True, read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'product', 'product_slug', 'sku', 'status', 'price', 'stock',
            'is_in_stock', 'color', 'sizes', 'variant_attributes',
            'attribute_dimensions', 'images', 'created_at', 'updated_at'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Product list with counts."""
    variant_count = serializers.IntegerField(read_only=True)
    active_variant_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'is_active',
            'variant_count', 'active_variant_count'
        ]


class ProductDetailSerializer(serializers.ModelSerializer):
    """Product detail with variants and attribute types."""
    variants = VariantListSerializer(many=True, read_only=True)
    attribute_types = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'is_active',
            'variants', 'attribute_types', 'created_at', 'updated_at'
        ]

    def get_attribute_types(self, obj):
        return AttributeTypeSerializer(obj.get_attribute_types(), many=True).data


# =============================================================================
# Configurator
# =============================================================================

class ConfiguratorQuerySerializer(serializers.Serializer):
    """Validates the non-selection query params of the configurator endpoint."""
    selection_key = serializers.ChoiceField(
        choices=['label', 'id'], required=False
    )
