"""
Tests for the seed_menus management command.
"""

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from access.management.commands.seed_menus import DEFAULT_MENUS
from access.models import MenuItem


class SeedMenusTests(TestCase):

    def test_seed_menus_is_idempotent(self):
        """Test running the command twice keeps one row per key."""
        call_command("seed_menus", stdout=StringIO())
        MenuItem.objects.filter(key="dept_suppliers").update(name="Changed")
        out = StringIO()

        call_command("seed_menus", stdout=out)

        self.assertEqual(MenuItem.objects.count(), len(DEFAULT_MENUS))
        self.assertEqual(
            MenuItem.objects.get(key="dept_suppliers").name,
            "Supplier Library",
        )
        self.assertIn("created: 0", out.getvalue())
