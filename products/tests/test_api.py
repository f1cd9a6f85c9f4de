from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from products.models import Category, Product

User = get_user_model()


class ProductAPITestCase(APITestCase):
    """Shared fixtures for product endpoint tests"""

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="manager@example.com",
            password="managerpass123"
        )
        self.client.force_authenticate(user=self.user)
        self.electronics = Category.objects.create(
            name="Electronics",
            slug="electronics"
        )
        self.books = Category.objects.create(
            name="Books",
            slug="books"
        )
        self.product = Product.objects.create(
            name="Wireless Mouse",
            description="Ergonomic wireless mouse",
            price=Decimal("29.99"),
            category=self.electronics
        )

    def valid_payload(self, **overrides):
        data = {
            'name': 'Keyboard',
            'price': '79.99',
            'category': self.electronics.id,
            'description': 'Mechanical keyboard'
        }
        data.update(overrides)
        return data


class AuthenticationRequiredTest(APITestCase):
    """Product endpoints reject anonymous requests"""

    def test_list_requires_authentication(self):
        response = self.client.get('/api/products/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_requires_authentication(self):
        category = Category.objects.create(name="Books", slug="books")
        response = self.client.post('/api/products/', {
            'name': 'Novel',
            'price': '9.99',
            'category': category.id,
            'description': 'A novel'
        })
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(Product.objects.count(), 0)


class ProductListTest(ProductAPITestCase):
    """Test cases for the paginated listing"""

    def test_list_products(self):
        """Test listing returns products with pagination metadata"""
        response = self.client.get('/api/products/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['current_page'], 1)
        self.assertEqual(response.data['total_pages'], 1)
        self.assertEqual(response.data['page_size'], 15)
        self.assertIsNone(response.data['next'])
        self.assertIsNone(response.data['previous'])
        self.assertEqual(len(response.data['results']), 1)
        result = response.data['results'][0]
        self.assertEqual(result['name'], "Wireless Mouse")
        self.assertEqual(result['price'], "29.99")
        self.assertEqual(result['category']['id'], self.electronics.id)

    def test_list_empty(self):
        """Test listing with no products renders an empty page"""
        Product.objects.all().delete()
        response = self.client.get('/api/products/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 0)
        self.assertEqual(response.data['results'], [])

    def test_list_pages_of_fifteen(self):
        """Test products are split into pages of 15 ordered by id"""
        for index in range(19):
            Product.objects.create(
                name=f"Product {index}",
                description="Bulk product",
                price=Decimal("1.00"),
                category=self.books
            )

        first = self.client.get('/api/products/')
        self.assertEqual(first.data['count'], 20)
        self.assertEqual(first.data['total_pages'], 2)
        self.assertEqual(len(first.data['results']), 15)
        self.assertEqual(first.data['results'][0]['id'], self.product.id)
        self.assertIsNotNone(first.data['next'])

        second = self.client.get('/api/products/', {'page': 2})
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertEqual(second.data['current_page'], 2)
        self.assertEqual(len(second.data['results']), 5)
        self.assertIsNone(second.data['next'])
        self.assertIsNotNone(second.data['previous'])

    def test_page_past_the_end_is_empty(self):
        """Test a page past the last one renders no results"""
        response = self.client.get('/api/products/', {'page': 5})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['current_page'], 5)
        self.assertEqual(response.data['results'], [])
        self.assertIsNone(response.data['next'])

    def test_invalid_page_number(self):
        """Test non-integer and non-positive pages are not found"""
        for page in ('abc', '0', '-1'):
            response = self.client.get('/api/products/', {'page': page})
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, page)


class ProductCreateTest(ProductAPITestCase):
    """Test cases for the creation form and store"""

    def test_create_form_lists_categories(self):
        """Test creation form data contains every category"""
        response = self.client.get('/api/products/create/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [category['name'] for category in response.data['categories']]
        self.assertEqual(names, ["Books", "Electronics"])

    def test_create_product(self):
        """Test storing a product"""
        response = self.client.post('/api/products/', self.valid_payload(category=self.books.id))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['alert'], {'type': 'success', 'message': 'Product created'})
        self.assertEqual(Product.objects.count(), 2)

        product = Product.objects.get(pk=response.data['product']['id'])
        self.assertEqual(product.name, 'Keyboard')
        self.assertEqual(product.price, Decimal('79.99'))
        self.assertEqual(product.description, 'Mechanical keyboard')
        self.assertEqual(product.category, self.books)

    def test_created_product_is_listed(self):
        """Test a stored product shows up in the listing"""
        self.client.post('/api/products/', self.valid_payload())
        response = self.client.get('/api/products/')
        listed = {item['name']: item for item in response.data['results']}
        self.assertIn('Keyboard', listed)
        self.assertEqual(listed['Keyboard']['price'], '79.99')
        self.assertEqual(listed['Keyboard']['description'], 'Mechanical keyboard')
        self.assertEqual(listed['Keyboard']['category']['id'], self.electronics.id)

    def test_create_with_unknown_category(self):
        """Test a category id that does not exist fails validation"""
        response = self.client.post('/api/products/', self.valid_payload(category=9999))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_with_non_integer_category(self):
        response = self.client.post('/api/products/', self.valid_payload(category='abc'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)

    def test_create_with_fractional_category_id(self):
        """Test a JSON float id is rejected instead of truncated to an existing id"""
        response = self.client.post(
            '/api/products/',
            self.valid_payload(category=self.electronics.id + 0.5),
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_requires_all_fields(self):
        """Test every field is required"""
        response = self.client.post('/api/products/', {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ('name', 'price', 'category', 'description'):
            self.assertIn(field, response.data)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_validation(self):
        """Test product creation validation rules"""
        invalid_payloads = [
            ('name', self.valid_payload(name='x' * 256)),
            ('name', self.valid_payload(name='')),
            ('price', self.valid_payload(price='cheap')),
            ('description', self.valid_payload(description='   ')),
        ]
        for field, payload in invalid_payloads:
            response = self.client.post('/api/products/', payload)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, field)
            self.assertIn(field, response.data)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_with_name_at_max_length(self):
        response = self.client.post('/api/products/', self.valid_payload(name='x' * 255))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_create_rounds_price_to_two_places(self):
        """Test extra decimal places are rounded half-up rather than rejected"""
        response = self.client.post('/api/products/', self.valid_payload(price='19.999'))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['product']['price'], '20.00')

        product = Product.objects.get(pk=response.data['product']['id'])
        self.assertEqual(product.price, Decimal('20.00'))

    def test_create_with_price_too_large(self):
        response = self.client.post('/api/products/', self.valid_payload(price='12345678901.00'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('price', response.data)


class ProductDetailTest(ProductAPITestCase):
    """Test cases for show and the edit form"""

    def test_retrieve_product(self):
        """Test retrieving a single product"""
        response = self.client.get(f'/api/products/{self.product.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], "Wireless Mouse")
        self.assertEqual(response.data['category']['name'], "Electronics")

    def test_retrieve_unknown_product(self):
        response = self.client.get('/api/products/9999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_edit_form(self):
        """Test edit form data contains the product and every category"""
        response = self.client.get(f'/api/products/{self.product.id}/edit/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['product']['id'], self.product.id)
        self.assertEqual(len(response.data['categories']), 2)

    def test_edit_form_unknown_product(self):
        response = self.client.get('/api/products/9999/edit/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ProductUpdateTest(ProductAPITestCase):
    """Test cases for update"""

    def test_update_replaces_all_fields(self):
        """Test update overwrites name, price, category and description"""
        data = {
            'name': 'Silent Mouse',
            'price': '19.50',
            'category': self.books.id,
            'description': 'Quiet clicks'
        }
        response = self.client.put(f'/api/products/{self.product.id}/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['alert'], {'type': 'success', 'message': 'Product updated'})

        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Silent Mouse')
        self.assertEqual(self.product.price, Decimal('19.50'))
        self.assertEqual(self.product.category, self.books)
        self.assertEqual(self.product.description, 'Quiet clicks')
        self.assertNotEqual(self.product.description, 'Ergonomic wireless mouse')

    def test_update_requires_every_field(self):
        """Test omitted fields are rejected rather than preserved"""
        data = {'name': 'Silent Mouse', 'price': '19.50', 'category': self.books.id}
        response = self.client.put(f'/api/products/{self.product.id}/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('description', response.data)

        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Wireless Mouse')

    def test_update_with_unknown_category(self):
        data = self.valid_payload(category=9999)
        response = self.client.put(f'/api/products/{self.product.id}/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.product.refresh_from_db()
        self.assertEqual(self.product.category, self.electronics)

    def test_partial_update_not_allowed(self):
        """Test PATCH is not offered"""
        response = self.client.patch(
            f'/api/products/{self.product.id}/', {'name': 'Renamed'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_update_unknown_product(self):
        response = self.client.put('/api/products/9999/', self.valid_payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ProductDeleteTest(ProductAPITestCase):
    """Test cases for destroy"""

    def test_delete_product(self):
        """Test deleting product"""
        response = self.client.delete(f'/api/products/{self.product.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['alert'], {'type': 'success', 'message': 'Product deleted'})
        self.assertEqual(Product.objects.count(), 0)

    def test_deleted_product_is_gone(self):
        """Test a deleted product is no longer listed or reachable"""
        product_id = self.product.id
        self.client.delete(f'/api/products/{product_id}/')

        listing = self.client.get('/api/products/')
        self.assertNotIn(product_id, [item['id'] for item in listing.data['results']])

        edit = self.client.get(f'/api/products/{product_id}/edit/')
        self.assertEqual(edit.status_code, status.HTTP_404_NOT_FOUND)

        update = self.client.put(f'/api/products/{product_id}/', self.valid_payload(), format='json')
        self.assertEqual(update.status_code, status.HTTP_404_NOT_FOUND)

        delete = self.client.delete(f'/api/products/{product_id}/')
        self.assertEqual(delete.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Product.objects.count(), 0)
