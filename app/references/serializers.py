"""
Serializers for references app.
"""

from rest_framework import serializers

from .models import Department


class DepartmentSerializer(serializers.ModelSerializer):
    """Serializer for Department objects."""

    class Meta:
        model = Department
        fields = ["id", "name", "code"]
        read_only_fields = ["id"]
