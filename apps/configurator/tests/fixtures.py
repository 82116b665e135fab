"""Variant payload builders shared by the engine tests."""


def color(color_id, name, hex_code=None):
    return {'id': color_id, 'name': name, 'hex_code': hex_code}


def size(size_id, name, category='apparel'):
    return {'category': category, 'size': {'id': size_id, 'name': name}}


def attr_value(value_id, label, type_id, type_slug, type_name=None, slug=None,
               role='CONFIGURATION', hex_code=None):
    return {
        'id': value_id,
        'label': label,
        'slug': slug,
        'role': role,
        'hex_code': hex_code,
        'attribute_type': {'id': type_id, 'slug': type_slug, 'name': type_name or type_slug.title()},
    }


def variant(variant_id, color=None, sizes=(), attribute_values=(), stock=None,
            status='ACTIVE', **extra):
    payload = {
        'id': variant_id,
        'sku': f'SKU-{variant_id}',
        'status': status,
        'stock': stock,
        'color': color,
        'sizes': list(sizes),
        'attribute_values': list(attribute_values),
    }
    payload.update(extra)
    return payload


RED = color('C1', 'Red', '#FF0000')
BLUE = color('C2', 'Blue', '#0000FF')
SMALL = size('S1', 'Small')
MEDIUM = size('S2', 'Medium')


def shirt_variants():
    """Red/Blue x Small/Medium; (Red, Medium) is out of stock, (Blue, Small) stock unknown."""
    return [
        variant(1, RED, [SMALL], stock=5),
        variant(2, RED, [MEDIUM], stock=0),
        variant(3, BLUE, [SMALL], stock=None),
        variant(4, BLUE, [MEDIUM], stock=3),
    ]


ATTRIBUTE_TYPES = [
    {'id': 1, 'slug': 'color', 'name': 'Cor', 'input_type': 'color_swatch', 'priority': 1},
    {'id': 2, 'slug': 'size', 'name': 'Tamanho', 'input_type': 'button_group', 'priority': 2},
    {'id': 10, 'slug': 'storage', 'name': 'Armazenamento', 'input_type': 'button_group', 'priority': 3},
    {'id': 11, 'slug': 'material', 'name': 'Material', 'input_type': 'dropdown', 'priority': 4},
]
