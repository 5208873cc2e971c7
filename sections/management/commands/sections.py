import json

import requests
from django.core.management.base import BaseCommand, CommandError

from sections.client import SectionService


class Command(BaseCommand):
    help = "List, create, update or delete sections on a remote LAMMS backend through its REST API"

    def add_arguments(self, parser):
        parser.add_argument('--base-url', type=str, default=None,
                            help='Backend origin (defaults to settings.LAMMS_API_BASE_URL)')
        subparsers = parser.add_subparsers(dest='action', required=True)

        subparsers.add_parser('list', help='List all sections')

        create = subparsers.add_parser('create', help='Create a section')
        create.add_argument('--data', type=str, required=True, help='Section payload as a JSON object')

        update = subparsers.add_parser('update', help='Update a section')
        update.add_argument('section_id', type=str)
        update.add_argument('--data', type=str, required=True, help='Section payload as a JSON object')

        delete = subparsers.add_parser('delete', help='Delete a section')
        delete.add_argument('section_id', type=str)

    def handle(self, *args, **options):
        service = SectionService(base_url=options.get('base_url'))
        action = options['action']

        try:
            if action == 'list':
                result = service.get_sections()
            elif action == 'create':
                result = service.create_section(self._parse_payload(options['data']))
            elif action == 'update':
                result = service.update_section(options['section_id'], self._parse_payload(options['data']))
            else:
                result = service.delete_section(options['section_id'])
        except requests.RequestException as e:
            raise CommandError(f"Sections API request failed: {e}")

        if result is not None:
            self.stdout.write(json.dumps(result, indent=2))
        self.stdout.write(self.style.SUCCESS(f"{action} OK"))

    def _parse_payload(self, raw):
        try:
            payload = json.loads(raw)
        except ValueError:
            raise CommandError("--data must be valid JSON")
        if not isinstance(payload, dict):
            raise CommandError("--data must be a JSON object")
        return payload
