from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Product,
    AttributeType,
    AttributeValue,
    Color,
    Size,
    Variant,
    VariantSize,
    VariantAttribute,
    VariantImage,
)
from .services.identity import build_identity_key
from .services.loader import VariantPayloadLoader


# =============================================================================
# Import/Export Resources
# =============================================================================

class VariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    product_slug = fields.Field(
        column_name='product_slug',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'slug')
    )
    color_name = fields.Field(
        column_name='color',
        attribute='color',
        widget=ForeignKeyWidget(Color, 'name')
    )

    class Meta:
        model = Variant
        import_id_fields = ['sku']
        fields = ('sku', 'product_slug', 'status', 'price', 'stock', 'color_name')
        export_order = fields


class AttributeValueResource(resources.ModelResource):
    """Resource for importing/exporting attribute values."""

    attribute_type_slug = fields.Field(
        column_name='attribute_type',
        attribute='attribute_type',
        widget=ForeignKeyWidget(AttributeType, 'slug')
    )

    class Meta:
        model = AttributeValue
        import_id_fields = ['attribute_type_slug', 'label']
        fields = (
            'attribute_type_slug', 'label', 'slug', 'role',
            'hex_code', 'display_order'
        )


# =============================================================================
# Inlines
# =============================================================================

class AttributeValueInline(SortableInlineAdminMixin, admin.TabularInline):
    model = AttributeValue
    extra = 1
    fields = ['label', 'slug', 'role', 'hex_code', 'display_order']


class VariantSizeInline(admin.TabularInline):
    model = VariantSize
    extra = 1
    fields = ['size', 'category']


class VariantAttributeInline(admin.TabularInline):
    model = VariantAttribute
    extra = 1
    autocomplete_fields = ['attribute_value']


class VariantImageInline(admin.TabularInline):
    model = VariantImage
    extra = 1
    fields = ['image', 'alt_text', 'is_primary', 'display_order', 'image_preview']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        if obj.image:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.thumbnail_small.url if obj.thumbnail_small else obj.image.url
            )
        return '-'
    image_preview.short_description = 'Preview'


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ['sku', 'status', 'price', 'stock']
    readonly_fields = ['sku']
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'variant_count', 'active_variant_count', 'is_active', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['variant_count', 'active_variant_count', 'created_at', 'updated_at']
    inlines = [VariantInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'slug', 'description', 'is_active')
        }),
        ('Informações', {
            'fields': ('variant_count', 'active_variant_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(AttributeType)
class AttributeTypeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'input_type', 'value_count', 'priority']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    inlines = [AttributeValueInline]

    def value_count(self, obj):
        return obj.values.count()
    value_count.short_description = 'Valores'


@admin.register(AttributeValue)
class AttributeValueAdmin(ImportExportModelAdmin):
    resource_class = AttributeValueResource
    list_display = ['label', 'slug', 'attribute_type', 'role', 'color_swatch', 'display_order']
    list_filter = ['attribute_type', 'role']
    list_editable = ['display_order']
    search_fields = ['label', 'slug', 'attribute_type__name']
    autocomplete_fields = ['attribute_type']

    def color_swatch(self, obj):
        if obj.hex_code:
            return format_html(
                '<div style="width: 20px; height: 20px; background-color: {}; '
                'border: 1px solid #ccc; border-radius: 3px;"></div>',
                obj.hex_code
            )
        return '-'
    color_swatch.short_description = 'Cor'


@admin.register(Color)
class ColorAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'color_swatch', 'display_order']
    search_fields = ['name']

    def color_swatch(self, obj):
        if obj.hex_code:
            return format_html(
                '<div style="width: 20px; height: 20px; background-color: {}; '
                'border: 1px solid #ccc; border-radius: 50%;"></div>',
                obj.hex_code
            )
        return '-'
    color_swatch.short_description = 'Amostra'


@admin.register(Size)
class SizeAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'display_order']
    list_filter = ['category']
    list_editable = ['display_order']
    search_fields = ['name', 'category']


@admin.register(Variant)
class VariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = VariantResource
    list_display = [
        'sku', 'product', 'color', 'price', 'stock',
        'stock_status', 'status', 'primary_image_preview'
    ]
    list_filter = ['product', 'status', 'color']
    list_editable = ['price', 'stock', 'status']
    search_fields = ['sku', 'product__name']
    autocomplete_fields = ['product']
    readonly_fields = ['created_at', 'updated_at', 'is_in_stock', 'identity_key']
    inlines = [VariantSizeInline, VariantAttributeInline, VariantImageInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product', 'sku', 'status', 'price')
        }),
        ('Dimensões', {
            'fields': ('color', 'attribute_dimensions', 'identity_key')
        }),
        ('Estoque', {
            'fields': ('stock', 'is_in_stock')
        }),
        ('Informações', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = [
        'activate_variants', 'deactivate_variants',
        'mark_stock_unknown', 'mark_out_of_stock'
    ]

    def stock_status(self, obj):
        if obj.stock is None:
            return format_html('<span style="color: blue;">Não informado</span>')
        if obj.stock <= 0:
            return format_html('<span style="color: red;">Sem estoque</span>')
        return format_html('<span style="color: green;">Em estoque</span>')
    stock_status.short_description = 'Status Estoque'

    def primary_image_preview(self, obj):
        img = obj.primary_image
        if img:
            return format_html(
                '<img src="{}" style="max-height: 40px; max-width: 60px;" />',
                img.thumbnail_small.url if img.thumbnail_small else img.image.url
            )
        return '-'
    primary_image_preview.short_description = 'Imagem'

    def identity_key(self, obj):
        if not obj.pk:
            return '-'
        return build_identity_key(VariantPayloadLoader().variant_payload(obj)) or '-'
    identity_key.short_description = 'Chave de identidade'

    @admin.action(description='Ativar variantes selecionadas')
    def activate_variants(self, request, queryset):
        count = queryset.update(status=Variant.STATUS_ACTIVE)
        self.message_user(request, f'{count} variantes ativadas.')

    @admin.action(description='Desativar variantes selecionadas')
    def deactivate_variants(self, request, queryset):
        count = queryset.update(status=Variant.STATUS_INACTIVE)
        self.message_user(request, f'{count} variantes desativadas.')

    @admin.action(description='Marcar estoque como não informado')
    def mark_stock_unknown(self, request, queryset):
        count = queryset.update(stock=None)
        self.message_user(request, f'{count} variantes atualizadas.')

    @admin.action(description='Marcar como sem estoque')
    def mark_out_of_stock(self, request, queryset):
        count = queryset.update(stock=0)
        self.message_user(request, f'{count} variantes atualizadas.')


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Configurador de Variantes'
admin.site.site_title = 'Configurador'
admin.site.index_title = 'Painel de Administração'
