#!/usr/bin/env python3
"""
Tests for the skill scale and the quote data models.
"""

import unittest
from decimal import Decimal

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mechanic_quote.skill import SkillLevel
from mechanic_quote.models import Customer, Mechanic, Quote, Service


class TestSkillLevel(unittest.TestCase):
    """Test cases for SkillLevel ordering and conversion."""

    def test_ordering(self):
        self.assertLess(SkillLevel.JUNIOR, SkillLevel.APPRENTICE)
        self.assertLess(SkillLevel.APPRENTICE, SkillLevel.EXPERIENCED)
        self.assertLess(SkillLevel.EXPERIENCED, SkillLevel.MASTER)
        self.assertGreaterEqual(SkillLevel.MASTER, SkillLevel.MASTER)
        self.assertEqual(max(SkillLevel), SkillLevel.MASTER)

    def test_ordinal_conversion(self):
        for level in SkillLevel:
            with self.subTest(level=level):
                self.assertEqual(SkillLevel.from_ordinal(level.ordinal), level)
        self.assertEqual(SkillLevel.JUNIOR.ordinal, 1)
        self.assertEqual(SkillLevel.MASTER.ordinal, 4)

    def test_unknown_ordinal(self):
        with self.assertRaises(ValueError):
            SkillLevel.from_ordinal(0)
        with self.assertRaises(ValueError):
            SkillLevel.from_ordinal(5)

    def test_parse(self):
        test_cases = [
            ("Junior", SkillLevel.JUNIOR),
            ("apprentice", SkillLevel.APPRENTICE),
            (" MASTER ", SkillLevel.MASTER),
            ("3", SkillLevel.EXPERIENCED),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(SkillLevel.parse(text), expected)

        with self.assertRaises(ValueError):
            SkillLevel.parse("guru")

    def test_label(self):
        self.assertEqual(SkillLevel.EXPERIENCED.label, "Experienced")
        self.assertEqual(str(SkillLevel.JUNIOR), "Junior")


class TestModels(unittest.TestCase):
    """Test cases for natural-key identity of the records."""

    def test_mechanic_identity_is_id(self):
        first = Mechanic(id=1, name="Mike Fulton", skill=SkillLevel.JUNIOR)
        namesake = Mechanic(id=2, name="Mike Fulton", skill=SkillLevel.JUNIOR)
        same_id = Mechanic(id=1, name="Someone Else", skill=SkillLevel.MASTER)

        self.assertNotEqual(first, namesake)
        self.assertEqual(first, same_id)
        self.assertEqual(len({first, namesake, same_id}), 2)

    def test_mechanic_busy_is_mutable(self):
        mechanic = Mechanic(id=1, name="Zane Marine", skill=SkillLevel.MASTER)
        self.assertFalse(mechanic.busy)
        mechanic.busy = True
        self.assertTrue(mechanic.busy)
        self.assertEqual(hash(mechanic), hash(Mechanic(id=1, name="x", skill=SkillLevel.JUNIOR)))

    def test_service_identity_is_name(self):
        oil = Service("Oil Change", SkillLevel.JUNIOR, Decimal("35.00"))
        repriced = Service("Oil Change", SkillLevel.MASTER, Decimal("99.00"))

        self.assertEqual(oil, repriced)
        self.assertEqual(len({oil, repriced}), 1)
        self.assertNotEqual(oil, Service("Brake Inspection", SkillLevel.JUNIOR, Decimal("35.00")))

    def test_service_price_coercion(self):
        self.assertEqual(Service("Oil Change", SkillLevel.JUNIOR, 35).price, Decimal("35"))
        self.assertEqual(Service("Oil Change", SkillLevel.JUNIOR, "35.50").price, Decimal("35.50"))
        self.assertIsInstance(Service("Oil Change", SkillLevel.JUNIOR, 15.0).price, Decimal)

    def test_service_rejects_bad_price(self):
        test_cases = ["NaN", "Infinity", "-Infinity", "-1", "abc", Decimal("-1"), float("nan")]
        for price in test_cases:
            with self.subTest(price=price):
                with self.assertRaises(ValueError):
                    Service("Oil Change", SkillLevel.JUNIOR, price)

    def test_service_is_immutable(self):
        service = Service("Oil Change", SkillLevel.JUNIOR, Decimal("35.00"))
        with self.assertRaises(AttributeError):
            service.price = Decimal("1.00")

    def test_customer_identity_is_email(self):
        reza = Customer("Reza Shirazian", "Mountain View", "reza@example.com")
        moved = Customer("Reza S.", "Palo Alto", "reza@example.com")
        sarah = Customer("Sarah Khosravani", "Mountain View", "sarah@example.com")

        self.assertEqual(reza, moved)
        self.assertNotEqual(reza, sarah)
        self.assertEqual(len({reza, moved, sarah}), 2)

    def test_quote_to_dict(self):
        quote = Quote(
            mechanic=Mechanic(id=4, name="Dick Duchess", skill=SkillLevel.APPRENTICE),
            services=(
                Service("Brake Pad Replacement", SkillLevel.APPRENTICE, Decimal("89")),
                Service("Oil Change", SkillLevel.JUNIOR, Decimal("35.00")),
            ),
            customer=Customer("Sarah Khosravani", "S Rengstorff", "sarah@example.com"),
            car="Honda",
            coupon="SPRING10",
        )

        data = quote.to_dict()
        self.assertEqual(data["mechanic"]["name"], "Dick Duchess")
        self.assertEqual(data["mechanic"]["skill"], "Apprentice")
        self.assertEqual(data["customer"]["email"], "sarah@example.com")
        self.assertEqual(data["car"], "Honda")
        self.assertEqual(data["coupon"], "SPRING10")
        self.assertEqual(
            [s["name"] for s in data["services"]],
            ["Brake Pad Replacement", "Oil Change"],
        )
        self.assertEqual(data["services"][0]["price"], "89.00")
        self.assertEqual(data["services"][0]["minimumSkillRequired"], "Apprentice")

    def test_quote_is_immutable(self):
        quote = Quote(
            mechanic=Mechanic(id=1, name="Steve Brimington", skill=SkillLevel.JUNIOR),
            services=(Service("Oil Change", SkillLevel.JUNIOR, Decimal("35.00")),),
            customer=Customer("Reza Shirazian", "Mountain View", "reza@example.com"),
            car="Honda",
        )
        self.assertIsNone(quote.coupon)
        with self.assertRaises(AttributeError):
            quote.car = "Toyota"


if __name__ == "__main__":
    unittest.main()
