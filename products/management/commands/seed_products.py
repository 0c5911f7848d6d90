from decimal import Decimal

from django.core.management.base import BaseCommand

from products.context import ProductContext
from products.models import Product

SAMPLE_PRODUCTS = [
    {'name': 'Product 1', 'price': Decimal('100'), 'description': 'Description 1'},
    {'name': 'Product 2', 'price': Decimal('200'), 'description': 'Description 2'},
    {'name': 'Wireless Mouse', 'price': Decimal('29.99'), 'description': 'Ergonomic wireless mouse'},
    {'name': 'Mechanical Keyboard', 'price': Decimal('79.99'), 'description': 'Tenkeyless, brown switches'},
    {'name': 'USB-C Hub', 'price': Decimal('45.50'), 'description': None},
]


class Command(BaseCommand):
    help = 'Seeds the database with sample products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing products before seeding',
        )

    def handle(self, *args, **options):
        context = ProductContext()

        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing existing products...'))
            for product in context.all():
                context.remove(product)
            context.save_changes()
            self.stdout.write(self.style.SUCCESS('Products cleared!'))

        self.stdout.write(self.style.SUCCESS('Starting product seeding...'))

        existing = set(context.products.values_list('name', flat=True))
        created = 0
        for product_data in SAMPLE_PRODUCTS:
            if product_data['name'] in existing:
                continue
            context.add(Product(**product_data))
            self.stdout.write(f"  Created product: {product_data['name']}")
            created += 1
        context.save_changes()

        self.stdout.write(self.style.SUCCESS(f'Seeding complete: {created} products created.'))
