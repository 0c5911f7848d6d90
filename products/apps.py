from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """
    Configuration for the Products app.
    Server-rendered pages and a JSON API over the same product table.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'products'
    verbose_name = 'Product Management'
