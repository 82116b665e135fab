from .availability import is_available, is_sellable, has_stock
from .catalog import AttributeCatalogBuilder, build_catalog
from .configurator import ProductConfigurator
from .dimensions import Dimension, DimensionReader
from .identity import VariantIndex, build_identity_key, build_index
from .resolver import resolve, resolve_with_path
from .selection import SelectionState

__all__ = [
    'AttributeCatalogBuilder',
    'Dimension',
    'DimensionReader',
    'ProductConfigurator',
    'SelectionState',
    'VariantIndex',
    'build_catalog',
    'build_identity_key',
    'build_index',
    'has_stock',
    'is_available',
    'is_sellable',
    'resolve',
    'resolve_with_path',
]
