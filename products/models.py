from django.db import models
from django.contrib.auth import get_user_model

User = get_user_model()


class Category(models.Model):
    """
    Category model for organizing products.
    Reference data: managed through the admin and the seed_categories command.
    """
    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Category name (must be unique)"
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        help_text="URL-friendly category identifier"
    )
    description = models.TextField(
        blank=True,
        null=True,
        help_text="Optional category description"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when category was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when category was last updated"
    )

    class Meta:
        verbose_name = "Category"
        verbose_name_plural = "Categories"
        ordering = ['name']

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    Product record. Every product belongs to exactly one category.
    """
    name = models.CharField(
        max_length=255,
        help_text="Product name"
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Product price"
    )
    description = models.TextField(
        help_text="Product description"
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products',
        help_text="Product category"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when product was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when product was last updated"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['id']

    def __str__(self):
        return self.name


class Importation(models.Model):
    """
    An uploaded bulk-import file.

    ``path`` is relative to settings.STORAGE_ROOT, e.g.
    ``app/upload/importations/<uuid4>.csv``.
    """
    path = models.CharField(
        max_length=255,
        help_text="Location of the uploaded file relative to the storage root"
    )
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='importations',
        help_text="User who uploaded the file"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when the file was uploaded"
    )
    updated_at = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        verbose_name = "Importation"
        verbose_name_plural = "Importations"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.path} ({self.user.email})"
