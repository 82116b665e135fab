from django_filters import rest_framework as filters
from django.db.models import Q
from apps.configurator.models import Variant


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for dimension lookups."""

    product = filters.CharFilter(field_name='product__slug')
    product_id = filters.NumberFilter(field_name='product__id')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Dimension filters
    color = filters.CharFilter(field_name='color__name', lookup_expr='iexact')
    size = filters.CharFilter(field_name='sizes__name', lookup_expr='iexact', distinct=True)
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = Variant
        fields = ['product', 'product_id', 'status', 'sku']

    def filter_in_stock(self, queryset, name, value):
        # Unknown stock (NULL) counts as in stock
        if value is True:
            return queryset.filter(Q(stock__isnull=True) | Q(stock__gt=0))
        elif value is False:
            return queryset.filter(stock__lte=0)
        return queryset

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute_slug:token
        Example: ?attribute=storage:128gb
        """
        if ':' not in value:
            return queryset

        attr_slug, token = value.split(':', 1)
        return queryset.filter(
            Q(variantattribute__attribute_value__slug=token) |
            Q(variantattribute__attribute_value__label=token),
            variantattribute__attribute_value__attribute_type__slug=attr_slug,
        ).distinct()
