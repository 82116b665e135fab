from django.db import models

from .attribute import hex_color_validator


class Color(models.Model):
    """Color master. Every variant has at most one color."""
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Nome'
    )
    hex_code = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Cor Hex'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Cor'
        verbose_name_plural = 'Cores'

    def __str__(self):
        return self.name


class Size(models.Model):
    """
    Size master. Sizes belong to a category (apparel, shoe, ring, ...) so a
    variant can carry one size per category.
    """
    name = models.CharField(
        max_length=50,
        verbose_name='Nome'
    )
    category = models.CharField(
        max_length=50,
        default='apparel',
        verbose_name='Categoria'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['category', 'display_order', 'name']
        unique_together = ['category', 'name']
        verbose_name = 'Tamanho'
        verbose_name_plural = 'Tamanhos'

    def __str__(self):
        return f"{self.name} ({self.category})"
