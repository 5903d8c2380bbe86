"""
Simple "smoke tests" to ensure the models can be created and
have a sensible string representation.
"""

from django.test import TestCase
from references.models import Department, Terminal


class ReferenceModelTests(TestCase):

    def test_department_model(self):
        """Test that a Department can be created
        and has a correct string representation."""
        dept = Department.objects.create(name="Procurement", code="PROC")
        self.assertEqual(str(dept), "Procurement")
        self.assertTrue(dept.is_active)

    def test_department_hierarchy(self):
        """Test Department with a parent-child relationship."""
        parent = Department.objects.create(name="Operations")
        child = Department.objects.create(name="Logistics", parent=parent)
        self.assertEqual(child.parent, parent)

    def test_terminal_choices(self):
        """Test the three terminals are defined."""
        self.assertEqual(
            set(Terminal.values), {"supplier", "department", "admin"}
        )
