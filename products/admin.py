from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Admin interface for Product model.
    """
    list_display = ['id', 'name', 'price', 'short_description']
    search_fields = ['name', 'description']
    ordering = ['id']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'price', 'description')
        }),
    )

    @admin.display(description='Description')
    def short_description(self, obj):
        """First 60 characters of the description"""
        if not obj.description:
            return '-'
        if len(obj.description) > 60:
            return f"{obj.description[:57]}..."
        return obj.description
