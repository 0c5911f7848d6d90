"""
JSON API over the product table.

Mirrors the web pages action for action, but answers with status codes
and JSON bodies instead of templates and redirects.
"""
import logging

from django.urls import reverse
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import permissions, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ProductNotFoundError
from .models import Product
from .serializers import ProductSerializer

logger = logging.getLogger(__name__)


def _payload_id(data):
    """
    The id carried in a request body, or None unless it is an integer
    (or a string of ASCII digits). Floats and booleans never match.
    """
    value = data.get('id') if hasattr(data, 'get') else None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


class ProductApiMixin:
    # Anonymous access; session auth would demand a CSRF token on writes
    authentication_classes = []
    permission_classes = [permissions.AllowAny]
    serializer_class = ProductSerializer

    def get_product(self, id):
        product = self.request.product_context.find(id)
        if product is None:
            logger.warning("Product %s not found", id)
            raise NotFound("Product not found.")
        return product


class ProductListApiView(ProductApiMixin, APIView):
    """
    GET  /api/Products  - GetProducts
    POST /api/Products  - CreateProduct
    """

    @extend_schema(
        tags=['Products'],
        operation_id='GetProducts',
        summary='List all products',
        description='Return every product in insertion order.',
        responses={200: ProductSerializer(many=True)},
    )
    def get(self, request):
        products = request.product_context.all()
        serializer = ProductSerializer(products, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=['Products'],
        operation_id='CreateProduct',
        summary='Create a product',
        description='Store a new product. Any id in the payload is ignored; the database assigns one.',
        request=ProductSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description='Validation errors keyed by field'),
        },
    )
    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        context = request.product_context
        product = context.add(Product(**serializer.validated_data))
        context.save_changes()

        location = reverse('api-products:detail', kwargs={'id': product.pk})
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={'Location': request.build_absolute_uri(location)}
        )


class ProductDetailApiView(ProductApiMixin, APIView):
    """
    GET    /api/Products/{id}  - GetProduct
    PUT    /api/Products/{id}  - UpdateProduct
    DELETE /api/Products/{id}  - DeleteProduct
    """

    @extend_schema(
        tags=['Products'],
        operation_id='GetProduct',
        summary='Get a product',
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description='No product with this id'),
        },
    )
    def get(self, request, id):
        product = self.get_product(id)
        return Response(ProductSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        operation_id='UpdateProduct',
        summary='Replace a product',
        description='Overwrite name, price and description. The payload id must equal the id in the URL.',
        request=ProductSerializer,
        responses={
            204: OpenApiResponse(description='Updated'),
            400: OpenApiResponse(description='Id mismatch or validation errors'),
            404: OpenApiResponse(description='No product with this id'),
        },
    )
    def put(self, request, id):
        if _payload_id(request.data) != id:
            logger.warning("Rejected update of product %s: payload id mismatch", id)
            return Response(
                {'detail': 'The id in the URL does not match the id in the body.'},
                status=status.HTTP_400_BAD_REQUEST
            )

        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        context = request.product_context
        if not context.exists(id):
            logger.warning("Product %s not found", id)
            raise NotFound("Product not found.")

        context.update(Product(pk=id, **serializer.validated_data))
        try:
            context.save_changes()
        except ProductNotFoundError:
            raise NotFound("Product not found.")

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        tags=['Products'],
        operation_id='DeleteProduct',
        summary='Delete a product',
        responses={
            204: OpenApiResponse(description='Deleted'),
            404: OpenApiResponse(description='No product with this id'),
        },
    )
    def delete(self, request, id):
        product = self.get_product(id)

        context = request.product_context
        context.remove(product)
        context.save_changes()

        return Response(status=status.HTTP_204_NO_CONTENT)
