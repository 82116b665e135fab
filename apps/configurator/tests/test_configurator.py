from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from apps.configurator.services import ProductConfigurator
from .fixtures import (
    ATTRIBUTE_TYPES, BLUE, RED, SMALL,
    attr_value, color, variant, shirt_variants,
)


class ProductConfiguratorTest(SimpleTestCase):

    def setUp(self):
        self.variants = shirt_variants()
        self.configurator = ProductConfigurator(self.variants, ATTRIBUTE_TYPES)

    def test_relevant_types(self):
        self.assertEqual(self.configurator.slugs, ['color', 'size'])
        self.assertEqual(self.configurator.get_attribute_type('color')['name'], 'Cor')
        self.assertIsNone(self.configurator.get_attribute_type('storage'))

    def test_shopping_flow(self):
        configurator = self.configurator
        self.assertIsNone(configurator.resolve())

        configurator.select('color', 'Red')
        self.assertTrue(configurator.is_available('size', 'Small'))
        self.assertFalse(configurator.is_available('size', 'Medium'))

        configurator.select('size', 'Small')
        self.assertEqual(configurator.resolve()['id'], 1)
        self.assertTrue(configurator.is_sellable)

        configurator.select('color', 'Blue')
        self.assertEqual(configurator.resolved_variant['id'], 3)
        self.assertTrue(configurator.is_sellable)

    def test_out_of_stock_variant_resolves_but_is_not_sellable(self):
        self.configurator.select('color', 'Red')
        self.configurator.select('size', 'Medium')
        variant, path = self.configurator.resolve_with_path()
        self.assertEqual(variant['id'], 2)
        self.assertEqual(path, 'index')
        self.assertFalse(self.configurator.is_sellable)

    def test_inactive_variants_are_left_out(self):
        variants = shirt_variants() + [
            variant(5, color('C3', 'Green'), [SMALL], stock=10, status='INACTIVE'),
        ]
        configurator = ProductConfigurator(variants, ATTRIBUTE_TYPES)
        self.assertEqual(len(configurator.variants), 4)
        labels = [v['label'] for v in configurator.attribute_types[0]['values']]
        self.assertNotIn('Green', labels)
        configurator.select('color', 'Green')
        self.assertIsNone(configurator.resolve())

    def test_selection_for_other_types_is_ignored(self):
        self.configurator.select('storage', '128GB')
        self.assertNotIn('storage', self.configurator.selection)

    def test_empty_token_clears_selection(self):
        self.configurator.select('color', 'Red')
        self.configurator.select('color', '')
        self.assertNotIn('color', self.configurator.selection)
        self.configurator.select('size', 'Small')
        self.configurator.deselect('size')
        self.assertEqual(len(self.configurator.selection), 0)

    def test_reset(self):
        self.configurator.select('color', 'Red')
        self.configurator.reset()
        self.assertEqual(self.configurator.selection, {})

    def test_initial_selection(self):
        configurator = ProductConfigurator(
            self.variants, ATTRIBUTE_TYPES, selection={'color': 'Blue', 'size': 'Medium'}
        )
        self.assertEqual(configurator.resolve()['id'], 4)

    def test_refresh_rebuilds_only_for_a_new_variant_list(self):
        self.configurator.select('color', 'Red')
        self.assertFalse(self.configurator.refresh(self.variants))
        self.assertEqual(self.configurator.selection, {'color': 'Red'})

        new_variants = [variant(9, BLUE, attribute_values=[attr_value(7, '128GB', 10, 'storage')])]
        self.assertTrue(self.configurator.refresh(new_variants))
        self.assertEqual(self.configurator.selection, {})
        self.assertEqual(self.configurator.slugs, ['color', 'storage'])
        self.assertEqual(len(self.configurator.index), 1)

    def test_options_flags(self):
        self.configurator.select('color', 'Red')
        color_options, size_options = self.configurator.options()

        self.assertEqual(color_options['selected'], 'Red')
        red, blue = color_options['values']
        self.assertTrue(red['is_selected'])
        self.assertFalse(blue['is_selected'])
        self.assertTrue(blue['is_available'])

        self.assertIsNone(size_options['selected'])
        availability = {v['label']: v['is_available'] for v in size_options['values']}
        self.assertEqual(availability, {'Small': True, 'Medium': False})

    def test_as_dict(self):
        self.configurator.select('color', 'Blue')
        self.configurator.select('size', 'Medium')
        data = self.configurator.as_dict()
        self.assertEqual(data['selection_key'], 'label')
        self.assertEqual(data['selection'], {'color': 'Blue', 'size': 'Medium'})
        self.assertEqual(data['variant']['id'], 4)
        self.assertEqual(data['resolution'], 'index')
        self.assertTrue(data['is_sellable'])
        self.assertEqual([t['slug'] for t in data['attribute_types']], ['color', 'size'])

    def test_identity_key(self):
        self.assertEqual(self.configurator.identity_key(self.variants[0]), 'COLOR:c1|SIZE:apparel:s1')


class SelectionKeyTest(SimpleTestCase):

    def test_select_by_value_id(self):
        configurator = ProductConfigurator(shirt_variants(), ATTRIBUTE_TYPES, selection_key='id')
        configurator.select('color', 'C1')
        self.assertFalse(configurator.is_available('size', 'S2'))
        configurator.select('size', 'S1')
        self.assertEqual(configurator.resolve()['id'], 1)

    def test_value_ids_match_case_insensitively(self):
        configurator = ProductConfigurator(shirt_variants(), ATTRIBUTE_TYPES, selection_key='id')
        configurator.select('color', 'c1')
        self.assertFalse(configurator.is_available('size', 's2'))
        configurator.select('size', ' S1 ')
        variant, path = configurator.resolve_with_path()
        self.assertEqual(variant['id'], 1)
        self.assertEqual(path, 'index')
        red = configurator.options()[0]['values'][0]
        self.assertEqual(red['token'], 'C1')
        self.assertTrue(red['is_selected'])

    def test_label_tokens_do_not_match_in_id_mode(self):
        configurator = ProductConfigurator(shirt_variants(), ATTRIBUTE_TYPES, selection_key='id')
        configurator.select('color', 'Red')
        self.assertIsNone(configurator.resolve())

    def test_invalid_selection_key(self):
        with self.assertRaises(ImproperlyConfigured):
            ProductConfigurator(shirt_variants(), ATTRIBUTE_TYPES, selection_key='sku')

    @override_settings(VARIANT_CONFIGURATOR={'SELECTION_KEY': 'id'})
    def test_default_comes_from_settings(self):
        configurator = ProductConfigurator([variant(1, RED, [SMALL])], ATTRIBUTE_TYPES)
        self.assertEqual(configurator.selection_key, 'id')
        configurator.select('color', 'C1')
        self.assertEqual(configurator.resolve()['id'], 1)
