import os
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from rest_framework import serializers

from .models import Category, Product, Importation
from .utils import looks_like_text


class RoundedDecimalField(serializers.DecimalField):
    """
    DecimalField that rounds extra decimal places half-up instead of
    rejecting them. Values too large for max_digits still fail.
    """

    def validate_precision(self, value):
        try:
            value = value.quantize(
                Decimal(1).scaleb(-self.decimal_places),
                rounding=ROUND_HALF_UP
            )
        except InvalidOperation:
            pass
        return super().validate_precision(value)


class CategorySerializer(serializers.ModelSerializer):
    """
    Read-only representation of a category, used by the product forms.
    """

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'description']
        read_only_fields = fields


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for product list and detail responses.
    """
    category = CategorySerializer(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'price', 'description', 'category',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.ModelSerializer):
    """
    Serializer for product create and update operations.

    All four fields are required on both operations; an update replaces
    every field of the product.
    """
    price = RoundedDecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Product price, rounded to 2 decimal places"
    )
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        pk_field=serializers.IntegerField(),
        help_text="ID of an existing category"
    )

    class Meta:
        model = Product
        fields = ['name', 'price', 'category', 'description']


class ImportationSerializer(serializers.ModelSerializer):
    user_email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Importation
        fields = ['id', 'path', 'user_email', 'created_at']
        read_only_fields = fields


class ImportationUploadSerializer(serializers.Serializer):
    """
    Validates an uploaded importation file: csv or plain text, 5120 KB max.
    """
    file = serializers.FileField(required=True)

    def validate_file(self, value):
        """Validate file type and size"""
        config = settings.IMPORTATION_SETTINGS

        extension = os.path.splitext(value.name)[1].lower()
        if extension not in config['ALLOWED_EXTENSIONS'] or not looks_like_text(value):
            allowed = ', '.join(ext.lstrip('.') for ext in config['ALLOWED_EXTENSIONS'])
            raise serializers.ValidationError(
                f"The file must be a file of type: {allowed}."
            )

        max_size_kb = config['MAX_FILE_SIZE_KB']
        if value.size > max_size_kb * 1024:
            raise serializers.ValidationError(
                f"The file may not be greater than {max_size_kb} kilobytes."
            )

        return value
