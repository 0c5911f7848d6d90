from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from products.management.commands.seed_products import SAMPLE_PRODUCTS
from products.models import Product


class SeedProductsCommandTest(TestCase):

    def test_seed(self):
        out = StringIO()
        call_command('seed_products', stdout=out)
        self.assertEqual(Product.objects.count(), len(SAMPLE_PRODUCTS))
        self.assertIn('Seeding complete', out.getvalue())

    def test_seed_skips_existing_names(self):
        call_command('seed_products', stdout=StringIO())
        call_command('seed_products', stdout=StringIO())
        self.assertEqual(Product.objects.count(), len(SAMPLE_PRODUCTS))

    def test_seed_clear(self):
        Product.objects.create(name='Leftover', price=1)
        call_command('seed_products', '--clear', stdout=StringIO())
        self.assertFalse(Product.objects.filter(name='Leftover').exists())
        self.assertEqual(
            list(Product.objects.values_list('name', flat=True)[:2]),
            ['Product 1', 'Product 2']
        )
