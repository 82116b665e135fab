from django.test import SimpleTestCase

from apps.configurator.services.configurator import ProductConfigurator
from apps.configurator.services.dimensions import DimensionReader
from apps.configurator.services.identity import VariantIndex
from apps.configurator.services.resolver import (
    PATH_INDEX,
    PATH_SCAN,
    resolve,
    resolve_with_path,
    selection_identity_key,
)
from .fixtures import (
    ATTRIBUTE_TYPES, BLUE, MEDIUM, RED, SMALL,
    attr_value, size, variant, shirt_variants,
)

SHIRT_TYPES = ['color', 'size']


class ResolverTest(SimpleTestCase):

    def setUp(self):
        self.variants = shirt_variants()
        self.reader = DimensionReader(ATTRIBUTE_TYPES)
        self.index = VariantIndex(self.variants, self.reader)

    def resolve(self, selection, types=SHIRT_TYPES):
        return resolve_with_path(selection, self.variants, types, self.index, self.reader)

    def test_full_selection_resolves_through_index(self):
        match, path = self.resolve({'color': 'Red', 'size': 'Small'})
        self.assertIs(match, self.variants[0])
        self.assertEqual(path, PATH_INDEX)

    def test_selection_key_is_rebuilt_from_loaded_ids(self):
        key = selection_identity_key([('color', 'Blue'), ('size', 'Medium')], self.variants, self.reader)
        self.assertEqual(key, 'COLOR:c2|SIZE:apparel:s2')

    def test_partial_selection_falls_back_to_first_match_in_list_order(self):
        match, path = self.resolve({'color': 'Blue'})
        self.assertIs(match, self.variants[2])
        self.assertEqual(path, PATH_SCAN)

    def test_empty_selection_resolves_nothing(self):
        self.assertEqual(self.resolve({}), (None, None))

    def test_selection_of_irrelevant_types_resolves_nothing(self):
        self.assertEqual(self.resolve({'storage': '128GB'}), (None, None))

    def test_unknown_token_resolves_nothing(self):
        self.assertEqual(self.resolve({'color': 'Green', 'size': 'Small'}), (None, None))

    def test_resolve_accepts_plain_dict_index(self):
        index = dict(self.index.entries)
        match = resolve({'color': 'Blue', 'size': 'Medium'}, self.variants, SHIRT_TYPES, index, self.reader)
        self.assertIs(match, self.variants[3])

    def test_raw_attribute_mapping_resolves_by_scan(self):
        variants = [
            variant('a', attributes={'color': 'Red', 'size': 'S'}),
            variant('b', attributes={'color': 'Red', 'size': 'M'}),
        ]
        reader = DimensionReader()
        index = VariantIndex(variants, reader)
        self.assertEqual(len(index), 0)
        match, path = resolve_with_path(
            {'color': 'Red', 'size': 'M'}, variants, SHIRT_TYPES, index, reader
        )
        self.assertIs(match, variants[1])
        self.assertEqual(path, PATH_SCAN)

    def test_scan_tie_break_is_list_order(self):
        first = variant('a', RED, [SMALL], [attr_value(7, '128GB', 10, 'storage')])
        second = variant('b', RED, [SMALL], [attr_value(8, '256GB', 10, 'storage')])
        types = ['color', 'size', 'storage']
        for variants in ([first, second], [second, first]):
            index = VariantIndex(variants, self.reader)
            match, path = resolve_with_path(
                {'color': 'Red', 'size': 'Small'}, variants, types, index, self.reader
            )
            self.assertIs(match, variants[0])
            self.assertEqual(path, PATH_SCAN)

    def test_duplicate_identity_resolves_to_last_indexed_variant(self):
        first = variant('a', BLUE, [MEDIUM], stock=1)
        second = variant('b', BLUE, [MEDIUM], stock=9)
        variants = [first, second]
        index = VariantIndex(variants, self.reader)
        match, path = resolve_with_path(
            {'color': 'Blue', 'size': 'Medium'}, variants, SHIRT_TYPES, index, self.reader
        )
        self.assertIs(match, second)
        self.assertEqual(path, PATH_INDEX)


class RoundTripTest(SimpleTestCase):
    """Selecting the tokens a variant shows resolves back to that variant."""

    def assertRoundTrip(self, variants, attribute_types=ATTRIBUTE_TYPES):
        configurator = ProductConfigurator(variants, attribute_types)
        for expected in variants:
            configurator.select_variant(expected)
            variant, path = configurator.resolve_with_path()
            self.assertIs(variant, expected)
            self.assertEqual(path, PATH_INDEX)

    def test_shirts(self):
        self.assertRoundTrip(shirt_variants())

    def test_phones_with_custom_attributes(self):
        storage_128 = attr_value(7, '128GB', 10, 'storage')
        storage_256 = attr_value(8, '256GB', 10, 'storage')
        processor = attr_value(50, 'A17 Pro', 20, 'processor', role='SPECIFICATION')
        self.assertRoundTrip([
            variant(1, RED, attribute_values=[storage_128, processor]),
            variant(2, RED, attribute_values=[storage_256, processor]),
            variant(3, BLUE, attribute_values=[storage_128, processor]),
            variant(4, BLUE, attribute_values=[storage_256, processor]),
        ])

    def test_structural_dimensions(self):
        self.assertRoundTrip([
            variant(1, RED, attribute_dimensions=[{'attribute_id': 11, 'value_id': 'cotton'}]),
            variant(2, RED, attribute_dimensions=[{'attribute_id': 11, 'value_id': 'linen'}]),
        ])

    def test_attribute_with_unknown_type_reference(self):
        storage = {'id': 7, 'label': '128GB', 'attribute_type': 10}
        self.assertRoundTrip(
            [
                variant(1, RED, [SMALL], attribute_values=[storage]),
                variant(2, BLUE, [SMALL], attribute_values=[storage]),
            ],
            attribute_types=[],
        )

    def test_variants_sharing_their_first_size(self):
        self.assertRoundTrip([
            variant(1, RED, [size('M1', 'M'), size('F40', '40', 'shoe')]),
            variant(2, RED, [size('M1', 'M'), size('F42', '42', 'shoe')]),
        ])


class SecondarySizeTest(SimpleTestCase):

    def setUp(self):
        self.variants = [
            variant(1, RED, [size('M1', 'M'), size('F40', '40', 'shoe')], stock=2),
            variant(2, RED, [size('M1', 'M'), size('F42', '42', 'shoe')], stock=2),
        ]
        self.configurator = ProductConfigurator(self.variants, ATTRIBUTE_TYPES)

    def test_each_size_category_is_its_own_type(self):
        self.assertEqual(self.configurator.slugs, ['color', 'size', 'size-shoe'])
        shoe = self.configurator.get_attribute_type('size-shoe')
        self.assertEqual(shoe['name'], 'Tamanho (shoe)')
        self.assertEqual(shoe['priority'], 2)
        self.assertEqual([v['label'] for v in shoe['values']], ['40', '42'])
        size_values = self.configurator.get_attribute_type('size')['values']
        self.assertEqual([v['label'] for v in size_values], ['M'])

    def test_offered_values_are_available_and_resolve(self):
        self.configurator.select('color', 'Red')
        self.configurator.select('size', 'M')
        self.assertTrue(self.configurator.is_available('size-shoe', '42'))
        self.configurator.select('size-shoe', '42')
        variant, path = self.configurator.resolve_with_path()
        self.assertIs(variant, self.variants[1])
        self.assertEqual(path, PATH_INDEX)

    def test_out_of_stock_secondary_size(self):
        self.variants[1]['stock'] = 0
        self.configurator.select('size', 'M')
        self.assertFalse(self.configurator.is_available('size-shoe', '42'))
        self.assertTrue(self.configurator.is_available('size-shoe', '40'))
