from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    ProductViewSet,
    AttributeTypeViewSet,
    AttributeValueViewSet,
    ColorViewSet,
    SizeViewSet,
    VariantViewSet,
)

router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='product')
router.register(r'attribute-types', AttributeTypeViewSet, basename='attribute-type')
router.register(r'attribute-values', AttributeValueViewSet, basename='attribute-value')
router.register(r'colors', ColorViewSet, basename='color')
router.register(r'sizes', SizeViewSet, basename='size')
router.register(r'variants', VariantViewSet, basename='variant')

urlpatterns = [
    path('', include(router.urls)),
]
