from django.core.management.base import BaseCommand
from django.db.models import Q
from products.models import Category


DEFAULT_CATEGORIES = [
    {'name': 'Electronics', 'slug': 'electronics', 'description': 'Phones, computers and accessories'},
    {'name': 'Home & Kitchen', 'slug': 'home-kitchen', 'description': 'Furniture, appliances and cookware'},
    {'name': 'Books', 'slug': 'books', 'description': 'Printed books and e-books'},
    {'name': 'Clothing', 'slug': 'clothing', 'description': 'Apparel, shoes and accessories'},
    {'name': 'Sports & Outdoors', 'slug': 'sports-outdoors', 'description': 'Sporting goods and outdoor gear'},
    {'name': 'Toys & Games', 'slug': 'toys-games', 'description': "Toys, board games and puzzles"},
]


class Command(BaseCommand):
    help = 'Seeds the database with the default product categories'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete categories without products before seeding',
        )

    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing unused categories...'))
            deleted, _ = Category.objects.filter(products__isnull=True).delete()
            self.stdout.write(self.style.SUCCESS(f'{deleted} categories deleted!'))

        self.stdout.write(self.style.SUCCESS('Starting category seeding...'))

        created_count = 0
        for category_data in DEFAULT_CATEGORIES:
            # Name and slug are both unique; skip a default that clashes on either
            if Category.objects.filter(
                Q(slug=category_data['slug']) | Q(name=category_data['name'])
            ).exists():
                continue

            category = Category.objects.create(**category_data)
            created_count += 1
            self.stdout.write(f'  Created category: {category.name}')

        self.stdout.write(self.style.SUCCESS(
            f'\n=== Category seeding completed! {created_count} created, '
            f'{len(DEFAULT_CATEGORIES) - created_count} already present ===\n'
        ))
