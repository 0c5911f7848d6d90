from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from products.models import Product


class ProductAPITest(APITestCase):
    """Test cases for the product JSON API"""

    def setUp(self):
        self.product1 = Product.objects.create(name="Product 1", price=Decimal("100"), description="Description 1")
        self.product2 = Product.objects.create(name="Product 2", price=Decimal("200"), description="Description 2")

    def detail_url(self, id):
        return f'/api/Products/{id}'

    # --- GetProducts ----------------------------------------------------------

    def test_get_products(self):
        """Test listing returns exactly the seeded products, in insertion order"""
        response = self.client.get('/api/Products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p['name'] for p in response.data], ["Product 1", "Product 2"])
        self.assertEqual(response.data[0], {
            'id': self.product1.pk,
            'name': 'Product 1',
            'price': '100.00',
            'description': 'Description 1',
        })

    def test_get_products_empty(self):
        Product.objects.all().delete()
        response = self.client.get('/api/Products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    # --- GetProduct -----------------------------------------------------------

    def test_get_product(self):
        response = self.client.get(self.detail_url(self.product2.pk))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['id'], self.product2.pk)
        self.assertEqual(response.data['name'], "Product 2")

    def test_get_product_not_found(self):
        """Test every id absent from the store answers 404"""
        taken = {self.product1.pk, self.product2.pk}
        for id in [0, 999, max(taken) + 1]:
            if id in taken:
                continue
            response = self.client.get(self.detail_url(id))
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    # --- CreateProduct --------------------------------------------------------

    def test_create_product(self):
        """Test create returns 201, a Location header and a fetchable record"""
        data = {'name': 'Product 3', 'price': 30, 'description': 'Description 3'}
        response = self.client.post('/api/Products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['name'], 'Product 3')
        self.assertEqual(response.data['price'], '30.00')

        new_id = response.data['id']
        self.assertNotIn(new_id, (self.product1.pk, self.product2.pk))
        self.assertTrue(response['Location'].endswith(self.detail_url(new_id)))

        fetched = self.client.get(self.detail_url(new_id))
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data['name'], 'Product 3')
        self.assertEqual(fetched.data['description'], 'Description 3')

    def test_create_ignores_supplied_id(self):
        data = {'id': self.product1.pk, 'name': 'Product 3', 'price': 30}
        response = self.client.post('/api/Products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(response.data['id'], self.product1.pk)

        self.assertEqual(Product.objects.count(), 3)
        self.product1.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')

    def test_create_validation(self):
        response = self.client.post('/api/Products', {'price': 'abc'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['name'], ['The Name field is required.'])
        self.assertIn('price', response.data)
        self.assertEqual(Product.objects.count(), 2)

    def test_create_rejects_non_object(self):
        response = self.client.post('/api/Products', ['Product 3'], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Product.objects.count(), 2)

    # --- UpdateProduct --------------------------------------------------------

    def test_update_product(self):
        existing = Product.objects.create(id=7, name="Product 7", price=Decimal("10"), description="Description 7")
        data = {'id': 7, 'name': 'Updated Product 7', 'price': 30, 'description': 'Updated Description 7'}

        response = self.client.put(self.detail_url(7), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        existing.refresh_from_db()
        self.assertEqual(existing.pk, 7)
        self.assertEqual(existing.name, 'Updated Product 7')
        self.assertEqual(existing.description, 'Updated Description 7')
        self.assertEqual(existing.price, Decimal('30'))

    def test_update_is_idempotent(self):
        data = {'id': self.product1.pk, 'name': 'Same', 'price': '12.50', 'description': None}

        self.client.put(self.detail_url(self.product1.pk), data, format='json')
        first = self.client.get(self.detail_url(self.product1.pk)).data
        response = self.client.put(self.detail_url(self.product1.pk), data, format='json')
        second = self.client.get(self.detail_url(self.product1.pk)).data

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(first, second)
        self.assertEqual(Product.objects.count(), 2)

    def test_update_id_mismatch(self):
        """Test a payload id that differs from the URL never touches storage"""
        data = {'id': self.product1.pk, 'name': 'Updated Product', 'price': 15, 'description': 'Updated Description'}

        for url_id in (self.product2.pk, 999):
            response = self.client.put(self.detail_url(url_id), data, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        self.product1.refresh_from_db()
        self.product2.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')
        self.assertEqual(self.product2.name, 'Product 2')
        self.assertEqual(Product.objects.count(), 2)

    def test_update_without_payload_id(self):
        data = {'name': 'Updated Product', 'price': 15}
        response = self.client.put(self.detail_url(self.product1.pk), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.product1.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')

    def test_update_string_payload_id(self):
        data = {'id': str(self.product1.pk), 'name': 'Updated Product', 'price': 15}
        response = self.client.put(self.detail_url(self.product1.pk), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_update_float_payload_id(self):
        """Test a fractional id is a mismatch, not a truncated match"""
        data = {'id': self.product1.pk + 0.9, 'name': 'Hijack', 'price': 1}
        response = self.client.put(self.detail_url(self.product1.pk), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.product1.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')

    def test_update_overflowing_payload_id(self):
        body = '{"id": 1e400, "name": "Hijack", "price": 1}'
        response = self.client.put(self.detail_url(self.product1.pk), body, content_type='application/json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.product1.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')

    def test_update_not_found(self):
        data = {'id': 999, 'name': 'Ghost', 'price': 1}
        response = self.client.put(self.detail_url(999), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Product.objects.filter(pk=999).exists())

    def test_update_validation(self):
        data = {'id': self.product1.pk, 'name': '', 'price': 15}
        response = self.client.put(self.detail_url(self.product1.pk), data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)
        self.product1.refresh_from_db()
        self.assertEqual(self.product1.name, 'Product 1')

    # --- DeleteProduct --------------------------------------------------------

    def test_delete_product(self):
        response = self.client.delete(self.detail_url(self.product1.pk))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(pk=self.product1.pk).exists())

        response = self.client.get(self.detail_url(self.product1.pk))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_twice(self):
        """Test a second delete reports the product as already absent"""
        self.client.delete(self.detail_url(self.product2.pk))
        response = self.client.delete(self.detail_url(self.product2.pk))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Product.objects.count(), 1)

    def test_delete_not_found(self):
        response = self.client.delete(self.detail_url(999))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Product.objects.count(), 2)


    # --- Session users -------------------------------------------------------

    def test_logged_in_browser_can_write_without_csrf_token(self):
        """Test a session cookie does not switch on CSRF checks for the product API"""
        user = get_user_model().objects.create_user(email='shopper@example.com', password='Str0ng-Pass!')
        client = APIClient(enforce_csrf_checks=True)
        client.force_login(user)

        response = client.post('/api/Products', {'name': 'Product 3', 'price': 3}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = client.delete(self.detail_url(self.product1.pk))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)


class SchemaTest(APITestCase):

    def test_schema_lists_product_operations(self):
        response = self.client.get('/api/schema/', HTTP_ACCEPT='application/vnd.oai.openapi+json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        paths = response.json()['paths']
        self.assertIn('/api/Products', paths)
        self.assertIn('/api/Products/{id}', paths)
