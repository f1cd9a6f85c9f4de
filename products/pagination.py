from django.core.paginator import EmptyPage, Paginator
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class LenientPaginator(Paginator):
    """
    Paginator that serves an empty page for numbers past the last page
    instead of raising EmptyPage. Numbers below 1 are still rejected.
    """

    def validate_number(self, number):
        try:
            return super().validate_number(number)
        except EmptyPage:
            number = int(number)
            if number < 1:
                raise
            return number


class ProductPagination(PageNumberPagination):
    """
    Page number pagination with page metadata in the response body.
    Query params: ?page=2&page_size=30
    """
    django_paginator_class = LenientPaginator
    page_size = 15
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response({
            'count': self.page.paginator.count,
            'total_pages': self.page.paginator.num_pages,
            'current_page': self.page.number,
            'page_size': self.page.paginator.per_page,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'required': ['count', 'total_pages', 'current_page', 'page_size', 'results'],
            'properties': {
                'count': {'type': 'integer', 'example': 123},
                'total_pages': {'type': 'integer', 'example': 9},
                'current_page': {'type': 'integer', 'example': 1},
                'page_size': {'type': 'integer', 'example': 15},
                'next': {'type': 'string', 'nullable': True, 'format': 'uri'},
                'previous': {'type': 'string', 'nullable': True, 'format': 'uri'},
                'results': schema,
            },
        }
