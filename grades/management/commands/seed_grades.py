import logging

from django.core.management.base import BaseCommand

from grades.models import Grade

logger = logging.getLogger(__name__)

DEFAULT_GRADES = [
    ('Kinder', 'K'),
    ('Grade 1', 'G1'),
    ('Grade 2', 'G2'),
    ('Grade 3', 'G3'),
    ('Grade 4', 'G4'),
    ('Grade 5', 'G5'),
    ('Grade 6', 'G6'),
]


class Command(BaseCommand):
    help = "Seed the default elementary grade levels (Kinder to Grade 6). Existing rows are left untouched."

    def add_arguments(self, parser):
        parser.add_argument('--inactive', action='store_true', help='Create missing grades disabled')

    def handle(self, *args, **options):
        is_active = not options.get('inactive')
        created_count = 0
        for order, (name, code) in enumerate(DEFAULT_GRADES):
            _, created = Grade.objects.get_or_create(
                name=name,
                defaults={'code': code, 'display_order': order, 'is_active': is_active},
            )
            if created:
                created_count += 1
                logger.info("Created grade %s", name)

        self.stdout.write(self.style.SUCCESS(f"Grades created: {created_count}"))
        self.stdout.write(self.style.SUCCESS(f"Grades total: {Grade.objects.count()}"))
