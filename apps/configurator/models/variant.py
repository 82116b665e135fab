from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
from simple_history.models import HistoricalRecords
from imagekit.models import ProcessedImageField, ImageSpecField
from imagekit.processors import ResizeToFill, ResizeToFit


class Variant(models.Model):
    """
    Individual SKU: one combination of color, sizes and attribute values.

    Stock semantics:
        None -> unknown, treated as available
        0    -> explicitly out of stock
        N>0  -> sellable
    """
    STATUS_DRAFT = 'DRAFT'
    STATUS_ACTIVE = 'ACTIVE'
    STATUS_INACTIVE = 'INACTIVE'
    STATUS_DISCONTINUED = 'DISCONTINUED'
    STATUS_ARCHIVED = 'ARCHIVED'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Rascunho'),
        (STATUS_ACTIVE, 'Ativo'),
        (STATUS_INACTIVE, 'Inativo'),
        (STATUS_DISCONTINUED, 'Descontinuado'),
        (STATUS_ARCHIVED, 'Arquivado'),
    ]

    product = models.ForeignKey(
        'configurator.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Produto'
    )
    sku = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='SKU'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_ACTIVE,
        verbose_name='Status'
    )

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço'
    )
    stock = models.IntegerField(
        null=True,
        blank=True,
        verbose_name='Estoque',
        help_text='Vazio = desconhecido (tratado como disponível)'
    )

    # Dimensions
    color = models.ForeignKey(
        'configurator.Color',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='variants',
        verbose_name='Cor'
    )
    sizes = models.ManyToManyField(
        'configurator.Size',
        through='VariantSize',
        related_name='variants',
        blank=True,
        verbose_name='Tamanhos'
    )
    attribute_values = models.ManyToManyField(
        'configurator.AttributeValue',
        through='VariantAttribute',
        related_name='variants',
        blank=True,
        verbose_name='Valores de atributos'
    )
    # Legacy structural shape: [{"attribute_id", "attribute_name", "value_id"}]
    attribute_dimensions = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Dimensões (legado)'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'sku']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.sku

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE

    @property
    def is_in_stock(self):
        return self.stock is None or self.stock > 0

    @property
    def primary_image(self):
        return self.images.filter(is_primary=True).first() or self.images.first()

    def get_options_dict(self):
        """Return dict of {attribute_slug: token} for this variant's dimensions."""
        options = {}
        if self.color_id:
            options['color'] = self.color.name
        from apps.configurator.services.dimensions import size_slug
        for position, vs in enumerate(self.variantsize_set.select_related('size')):
            options[size_slug(position, vs.category)] = vs.size.name
        for va in self.variantattribute_set.select_related('attribute_value__attribute_type'):
            value = va.attribute_value
            if value.role == value.ROLE_SPECIFICATION:
                continue
            options[value.attribute_type.slug] = value.token
        return options


class VariantSize(models.Model):
    """
    Through model linking Variant to Size.
    Category is copied from the size so a variant keeps one size per category.
    """
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        verbose_name='Variante'
    )
    size = models.ForeignKey(
        'configurator.Size',
        on_delete=models.PROTECT,
        verbose_name='Tamanho'
    )
    category = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Categoria'
    )

    class Meta:
        ordering = ['id']
        unique_together = ['variant', 'category']
        verbose_name = 'Tamanho da Variante'
        verbose_name_plural = 'Tamanhos das Variantes'

    def __str__(self):
        return f"{self.variant.sku} - {self.size}"

    def save(self, *args, **kwargs):
        if not self.category:
            self.category = self.size.category
        super().save(*args, **kwargs)


class VariantAttribute(models.Model):
    """
    Through model linking Variant to AttributeValue.
    Ensures each variant has only one value per attribute type.
    """
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        verbose_name='Variante'
    )
    attribute_value = models.ForeignKey(
        'configurator.AttributeValue',
        on_delete=models.CASCADE,
        verbose_name='Valor de Atributo'
    )

    class Meta:
        ordering = ['id']
        unique_together = ['variant', 'attribute_value']
        verbose_name = 'Atributo da Variante'
        verbose_name_plural = 'Atributos das Variantes'

    def __str__(self):
        return f"{self.variant.sku} - {self.attribute_value}"

    def save(self, *args, **kwargs):
        # Ensure only one value per attribute type per variant
        existing = VariantAttribute.objects.filter(
            variant=self.variant,
            attribute_value__attribute_type=self.attribute_value.attribute_type
        ).exclude(pk=self.pk)

        if existing.exists():
            existing.delete()

        super().save(*args, **kwargs)


class VariantImage(models.Model):
    """Images for each variant with automatic thumbnail generation."""
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name='Variante'
    )
    image = ProcessedImageField(
        upload_to='variants/%Y/%m/',
        processors=[ResizeToFit(1200, 1200)],
        format='JPEG',
        options={'quality': 85},
        verbose_name='Imagem'
    )
    thumbnail = ImageSpecField(
        source='image',
        processors=[ResizeToFill(300, 300)],
        format='JPEG',
        options={'quality': 70}
    )
    thumbnail_small = ImageSpecField(
        source='image',
        processors=[ResizeToFill(100, 100)],
        format='JPEG',
        options={'quality': 60}
    )
    alt_text = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Texto alternativo'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )
    is_primary = models.BooleanField(
        default=False,
        verbose_name='Imagem principal'
    )

    class Meta:
        ordering = ['-is_primary', 'display_order']
        verbose_name = 'Imagem da Variante'
        verbose_name_plural = 'Imagens das Variantes'

    def __str__(self):
        return f"{self.variant.sku} - Imagem {self.display_order}"

    def save(self, *args, **kwargs):
        # Ensure only one primary image per variant
        if self.is_primary:
            VariantImage.objects.filter(
                variant=self.variant,
                is_primary=True
            ).exclude(pk=self.pk).update(is_primary=False)

        # Auto-generate alt text if empty
        if not self.alt_text:
            self.alt_text = str(self.variant)

        super().save(*args, **kwargs)
