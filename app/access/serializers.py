"""
Serializers for menu items.
"""

from rest_framework import serializers

from .models import MenuItem


class MenuItemSerializer(serializers.ModelSerializer):
    """Serializer for a visible menu entry."""

    class Meta:
        model = MenuItem
        fields = [
            "key",
            "name",
            "path",
            "icon",
            "terminal",
            "parent_key",
            "sort_order",
        ]
        read_only_fields = fields
