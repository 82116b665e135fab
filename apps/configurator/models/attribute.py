from django.db import models
from django.core.validators import RegexValidator
from django.utils.text import slugify


hex_color_validator = RegexValidator(
    regex=r'^#[0-9A-Fa-f]{6}$',
    message='Cor deve estar no formato hexadecimal (#RRGGBB)'
)


class AttributeType(models.Model):
    """
    Attribute types that can be added at runtime.
    Examples: Storage, Material, RAM. Color and size have their own masters.
    """
    INPUT_TYPE_CHOICES = [
        ('color_swatch', 'Amostra de cor'),
        ('swatch', 'Amostra'),
        ('image_grid', 'Grade de imagens'),
        ('button_group', 'Grupo de botões'),
        ('button', 'Botão'),
        ('dropdown', 'Lista suspensa'),
        ('radio', 'Rádio'),
        ('checkbox', 'Caixa de seleção'),
    ]

    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        verbose_name='Slug'
    )
    input_type = models.CharField(
        max_length=20,
        choices=INPUT_TYPE_CHOICES,
        default='button_group',
        verbose_name='Tipo de controle'
    )
    priority = models.PositiveIntegerField(
        default=99,
        verbose_name='Prioridade',
        help_text='Ordem de exibição (cor=1, tamanho=2)'
    )

    class Meta:
        ordering = ['priority', 'name']
        verbose_name = 'Tipo de Atributo'
        verbose_name_plural = 'Tipos de Atributos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class AttributeValue(models.Model):
    """
    Possible values for each attribute type.

    Values with role SPECIFICATION are informational (e.g. "Processor: A17")
    and never offered as a configurable option.
    """
    ROLE_CONFIGURATION = 'CONFIGURATION'
    ROLE_SPECIFICATION = 'SPECIFICATION'
    ROLE_CHOICES = [
        (ROLE_CONFIGURATION, 'Configuração'),
        (ROLE_SPECIFICATION, 'Especificação'),
    ]

    attribute_type = models.ForeignKey(
        AttributeType,
        on_delete=models.CASCADE,
        related_name='values',
        verbose_name='Tipo de Atributo'
    )
    label = models.CharField(
        max_length=100,
        verbose_name='Rótulo'
    )
    slug = models.SlugField(
        max_length=100,
        blank=True,
        verbose_name='Slug'
    )
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_CONFIGURATION,
        verbose_name='Papel'
    )
    hex_code = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Cor Hex',
        help_text='Para swatches de cor (#RRGGBB)'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'label']
        unique_together = ['attribute_type', 'label']
        verbose_name = 'Valor de Atributo'
        verbose_name_plural = 'Valores de Atributos'

    def __str__(self):
        return f"{self.attribute_type.name}: {self.label}"

    @property
    def token(self):
        return self.slug or self.label
