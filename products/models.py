from django.db import models


class Product(models.Model):
    """
    A catalog product.
    The id is assigned by the database on insert and never changes.
    Field requirements (e.g. a non-blank name) are enforced by
    products.validation, not by the table definition.
    """
    name = models.CharField(
        max_length=200,
        blank=True,
        default='',
        help_text="Product name"
    )
    price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        default=0,
        help_text="Unit price"
    )
    description = models.TextField(
        blank=True,
        null=True,
        help_text="Optional product description"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['id']

    def __str__(self):
        return self.name or f"Product #{self.pk}"

    def copy_from(self, other):
        """Overwrite the editable fields with those of another product"""
        self.name = other.name
        self.price = other.price
        self.description = other.description
