from django.test import SimpleTestCase

from apps.configurator.services.catalog import build_catalog, first_image
from apps.configurator.services.dimensions import DimensionReader
from .fixtures import (
    ATTRIBUTE_TYPES, BLUE, RED, SMALL,
    attr_value, color, variant, shirt_variants,
)


def values_of(catalog, slug):
    entry = next(t for t in catalog if t['slug'] == slug)
    return entry['values']


class AttributeCatalogTest(SimpleTestCase):

    def test_only_types_with_values_are_returned_in_priority_order(self):
        catalog = build_catalog(shirt_variants(), ATTRIBUTE_TYPES)
        self.assertEqual([t['slug'] for t in catalog], ['color', 'size'])
        self.assertEqual([v['label'] for v in values_of(catalog, 'color')], ['Red', 'Blue'])
        self.assertEqual([v['label'] for v in values_of(catalog, 'size')], ['Small', 'Medium'])

    def test_color_and_size_exist_without_configuration(self):
        catalog = build_catalog(shirt_variants(), [])
        color_type, size_type = catalog
        self.assertEqual(color_type['slug'], 'color')
        self.assertEqual(color_type['input_type'], 'color_swatch')
        self.assertEqual(color_type['priority'], 1)
        self.assertEqual(size_type['slug'], 'size')
        self.assertEqual(size_type['priority'], 2)

    def test_priority_zero_is_kept(self):
        types = [{'id': 10, 'slug': 'storage', 'name': 'Storage', 'priority': 0}]
        variants = [variant(1, RED, attribute_values=[attr_value(7, '128GB', 10, 'storage')])]
        catalog = build_catalog(variants, types)
        self.assertEqual([t['slug'] for t in catalog], ['storage', 'color'])
        self.assertEqual(catalog[0]['priority'], 0)

    def test_unconfigured_type_is_synthesized(self):
        variants = [variant(1, attribute_values=[attr_value(9, 'Matte', 12, 'finish')])]
        catalog = build_catalog(variants, ATTRIBUTE_TYPES)
        self.assertEqual(len(catalog), 1)
        finish = catalog[0]
        self.assertEqual(finish['slug'], 'finish')
        self.assertEqual(finish['name'], 'Finish')
        self.assertEqual(finish['id'], 12)
        self.assertEqual(finish['priority'], 99)
        self.assertEqual(finish['input_type'], 'button_group')

    def test_values_are_deduplicated_and_enriched(self):
        variants = [
            variant(1, color('C1', 'Red'), [SMALL], images=['red-small.jpg']),
            variant(2, RED, [SMALL], images=['red-small-2.jpg'], price='49.90'),
        ]
        red = values_of(build_catalog(variants, ATTRIBUTE_TYPES), 'color')
        self.assertEqual(len(red), 1)
        self.assertEqual(red[0]['hex_code'], '#FF0000')
        self.assertEqual(red[0]['preview_image'], 'red-small.jpg')
        self.assertEqual(red[0]['preview_price'], '49.90')

    def test_value_token_prefers_slug(self):
        variants = [variant(1, attribute_values=[attr_value(7, '128 GB', 10, 'storage', slug='128gb')])]
        storage = values_of(build_catalog(variants, ATTRIBUTE_TYPES), 'storage')
        self.assertEqual(storage[0]['token'], '128gb')
        self.assertEqual(storage[0]['label'], '128 GB')

    def test_specification_values_are_not_offered(self):
        variants = [variant(1, RED, attribute_values=[
            attr_value(50, 'A17 Pro', 20, 'processor', role='SPECIFICATION'),
        ])]
        catalog = build_catalog(variants, ATTRIBUTE_TYPES)
        self.assertEqual([t['slug'] for t in catalog], ['color'])

    def test_structural_dimensions_use_raw_value_as_label(self):
        variants = [variant(1, attribute_dimensions=[
            {'attribute_id': 11, 'attribute_name': 'Material', 'value_id': 'Cotton'},
        ])]
        catalog = build_catalog(variants, ATTRIBUTE_TYPES)
        self.assertEqual(catalog[0]['slug'], 'material')
        self.assertEqual(catalog[0]['input_type'], 'dropdown')
        self.assertEqual(catalog[0]['values'][0]['label'], 'Cotton')
        self.assertEqual(catalog[0]['values'][0]['token'], 'Cotton')

    def test_values_without_type_reference_are_dropped(self):
        orphan = {'id': 3, 'label': 'Loose', 'attribute_type': None}
        variants = [variant(1, BLUE, attribute_values=[orphan])]
        catalog = build_catalog(variants, ATTRIBUTE_TYPES)
        self.assertEqual([t['slug'] for t in catalog], ['color'])

    def test_malformed_entries_are_skipped(self):
        variants = [
            None,
            'not-a-variant',
            variant(1, RED, sizes=['S1', {'category': 'apparel', 'size': 'S1'}, SMALL]),
        ]
        catalog = build_catalog(variants, ATTRIBUTE_TYPES)
        self.assertEqual([t['slug'] for t in catalog], ['color', 'size'])
        self.assertEqual(len(values_of(catalog, 'size')), 1)

    def test_id_selection_key_uses_value_ids_as_tokens(self):
        reader = DimensionReader(ATTRIBUTE_TYPES, selection_key='id')
        catalog = build_catalog(shirt_variants(), ATTRIBUTE_TYPES, reader)
        self.assertEqual([v['token'] for v in values_of(catalog, 'color')], ['C1', 'C2'])


class FirstImageTest(SimpleTestCase):

    def test_accepts_urls_and_objects(self):
        self.assertEqual(first_image({'images': ['a.jpg', 'b.jpg']}), 'a.jpg')
        self.assertEqual(first_image({'images': [{'url': 'c.jpg'}]}), 'c.jpg')
        self.assertIsNone(first_image({'images': []}))
        self.assertIsNone(first_image({}))
