import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .models import Category, Product, Importation
from .serializers import (
    CategorySerializer,
    ProductSerializer,
    ProductWriteSerializer,
    ImportationSerializer,
    ImportationUploadSerializer,
)
from .utils import (
    build_importation_storage_name,
    build_importation_path,
    store_importation_file,
)

logger = logging.getLogger(__name__)

IMPORTATION_UPLOADED_MESSAGE = 'File uploaded. You will be notified by email when importation finish'


def success_alert(message):
    """Status payload shown once by the client after an operation."""
    return {'type': 'success', 'message': message}


@extend_schema_view(
    list=extend_schema(
        tags=['Products'],
        summary='List products',
        description='Retrieve a paginated list of products (15 per page).',
        parameters=[
            OpenApiParameter(
                name='page',
                type=OpenApiTypes.INT,
                description='Page number'
            ),
        ]
    ),
    retrieve=extend_schema(
        tags=['Products'],
        summary='Get product details',
        description='Retrieve a single product with its category.',
    ),
    create=extend_schema(
        tags=['Products'],
        summary='Create a new product',
        description='Create a product in an existing category.',
        request=ProductWriteSerializer,
    ),
    update=extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Replace name, price, category and description of a product.',
        request=ProductWriteSerializer,
    ),
    destroy=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description='Permanently delete a product.',
    ),
)
class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Product CRUD operations.

    Provides:
    - list: GET /api/products/
    - create_form: GET /api/products/create/
    - create: POST /api/products/
    - retrieve: GET /api/products/{id}/
    - edit_form: GET /api/products/{id}/edit/
    - update: PUT /api/products/{id}/
    - destroy: DELETE /api/products/{id}/
    - import_file: POST /api/products/import/

    Updates always replace every field, so PATCH is not offered.
    """
    queryset = Product.objects.select_related('category').all()
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_serializer_class(self):
        """
        Return appropriate serializer based on action.
        """
        if self.action in ['create', 'update']:
            return ProductWriteSerializer
        elif self.action == 'import_file':
            return ImportationUploadSerializer
        return ProductSerializer

    def create(self, request, *args, **kwargs):
        """
        Store a new product and answer with the created record.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info("Product %s created by user %s", product.pk, request.user.pk)

        return Response(
            {
                'alert': success_alert('Product created'),
                'product': ProductSerializer(product).data
            },
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """
        Replace all fields of an existing product.
        """
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info("Product %s updated by user %s", product.pk, request.user.pk)

        return Response({
            'alert': success_alert('Product updated'),
            'product': ProductSerializer(product).data
        })

    def destroy(self, request, *args, **kwargs):
        """
        Delete product with custom response.
        """
        instance = self.get_object()
        product_id = instance.pk

        self.perform_destroy(instance)

        logger.info("Product %s deleted by user %s", product_id, request.user.pk)

        return Response(
            {'alert': success_alert('Product deleted')},
            status=status.HTTP_200_OK
        )

    @extend_schema(
        tags=['Products'],
        summary='Product creation form data',
        description='Categories available to a new product.',
    )
    @action(detail=False, methods=['get'], url_path='create')
    def create_form(self, request):
        """
        GET /api/products/create/
        """
        categories = Category.objects.all()

        return Response({
            'categories': CategorySerializer(categories, many=True).data
        })

    @extend_schema(
        tags=['Products'],
        summary='Product edit form data',
        description='The product to edit together with every category.',
    )
    @action(detail=True, methods=['get'], url_path='edit')
    def edit_form(self, request, pk=None):
        """
        GET /api/products/{id}/edit/
        """
        product = self.get_object()
        categories = Category.objects.all()

        return Response({
            'product': ProductSerializer(product).data,
            'categories': CategorySerializer(categories, many=True).data
        })

    @extend_schema(
        tags=['Importations'],
        summary='Upload importation file',
        description=(
            'Upload a CSV (or plain text) file of products, 5120 KB max. '
            'The importation is recorded before the file is written to storage.'
        ),
        request={
            'multipart/form-data': {
                'type': 'object',
                'properties': {
                    'file': {'type': 'string', 'format': 'binary'}
                },
                'required': ['file']
            }
        },
    )
    @action(
        detail=False,
        methods=['post'],
        url_path='import',
        parser_classes=[MultiPartParser, FormParser]
    )
    def import_file(self, request):
        """
        POST /api/products/import/

        The Importation row is saved first and the file written second;
        a failed write leaves the row without a backing file.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        upload = serializer.validated_data['file']

        storage_name = build_importation_storage_name()

        importation = Importation(
            path=build_importation_path(storage_name),
            user=request.user
        )
        importation.save()

        stored_name = store_importation_file(upload, storage_name)
        if stored_name != storage_name:
            importation.path = build_importation_path(stored_name)
            importation.save(update_fields=['path', 'updated_at'])
            logger.warning(
                "Importation %s stored as %s instead of %s",
                importation.pk, stored_name, storage_name
            )

        logger.info(
            "Importation %s uploaded by user %s to %s (%s bytes)",
            importation.pk, request.user.pk, importation.path, upload.size
        )

        return Response(
            {
                'alert': success_alert(IMPORTATION_UPLOADED_MESSAGE),
                'importation': ImportationSerializer(importation).data
            },
            status=status.HTTP_201_CREATED
        )
