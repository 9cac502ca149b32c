import unittest

from apps.carts.dtos import CartLineDTO
from apps.carts.mappers import CartLineMapper


class CartLineMapperTests(unittest.TestCase):
    def test_from_raw_reads_camel_case_keys(self):
        self.assertEqual(
            CartLineMapper.from_raw({"productId": 4, "quantity": 2}),
            CartLineDTO(product_id=4, quantity=2),
        )

    def test_from_raw_rejects_non_integer_values(self):
        self.assertIsNone(CartLineMapper.from_raw({"productId": "4", "quantity": 2}))
        self.assertIsNone(CartLineMapper.from_raw({"productId": 4, "quantity": 1.5}))
        self.assertIsNone(CartLineMapper.from_raw({"productId": True, "quantity": 1}))
        self.assertIsNone(CartLineMapper.from_raw({"productId": 4}))
        self.assertIsNone(CartLineMapper.from_raw([4, 2]))

    def test_many_from_raw_keeps_order(self):
        lines = CartLineMapper.many_from_raw(
            [{"productId": 3, "quantity": 1}, {"productId": 1, "quantity": 2}]
        )
        self.assertEqual([line.product_id for line in lines], [3, 1])

    def test_many_from_raw_drops_malformed_and_non_positive_entries(self):
        entries = [
            {"productId": 1, "quantity": 2},
            "junk",
            {"productId": 2, "quantity": 0},
            {"productId": 3, "quantity": -4},
        ]
        with self.assertLogs("apps.carts.mappers", level="WARNING") as captured:
            lines = CartLineMapper.many_from_raw(entries)
        self.assertEqual(lines, [CartLineDTO(product_id=1, quantity=2)])
        self.assertEqual(len(captured.records), 3)

    def test_many_from_raw_merges_duplicate_products(self):
        entries = [
            {"productId": 1, "quantity": 2},
            {"productId": 2, "quantity": 1},
            {"productId": 1, "quantity": 3},
        ]
        with self.assertLogs("apps.carts.mappers", level="WARNING"):
            lines = CartLineMapper.many_from_raw(entries)
        self.assertEqual(
            lines,
            [CartLineDTO(product_id=1, quantity=5), CartLineDTO(product_id=2, quantity=1)],
        )

    def test_many_to_raw_uses_wire_keys(self):
        self.assertEqual(
            CartLineMapper.many_to_raw([CartLineDTO(product_id=7, quantity=1)]),
            [{"productId": 7, "quantity": 1}],
        )
