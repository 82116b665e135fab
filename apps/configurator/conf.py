"""
Engine settings, read from the ``VARIANT_CONFIGURATOR`` dict in Django settings.

Example:
    VARIANT_CONFIGURATOR = {
        'SELECTION_KEY': 'id',
        'DEFAULT_PRIORITY': 50,
    }
"""

from django.conf import settings

SELECTION_KEYS = ('label', 'id')

DEFAULTS = {
    'SELECTION_KEY': 'label',
    'KEY_SEPARATOR': '|',
    'DEFAULT_PRIORITY': 99,
    'DEFAULT_INPUT_TYPE': 'button_group',
    # color and size always exist, even when the configured catalog omits them
    'DEFAULT_ATTRIBUTE_TYPES': [
        {'slug': 'color', 'name': 'Cor', 'input_type': 'color_swatch', 'priority': 1},
        {'slug': 'size', 'name': 'Tamanho', 'input_type': 'button_group', 'priority': 2},
    ],
}


class ConfiguratorSettings:
    """Attribute access to VARIANT_CONFIGURATOR with fallbacks to DEFAULTS."""

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid configurator setting: '{name}'")
        user_settings = getattr(settings, 'VARIANT_CONFIGURATOR', None) or {}
        return user_settings.get(name, DEFAULTS[name])


configurator_settings = ConfiguratorSettings()
