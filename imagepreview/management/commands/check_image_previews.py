from django.apps import apps
from django.core.exceptions import SuspiciousFileOperation
from django.core.management.base import BaseCommand, CommandError
from django.db import models


class Command(BaseCommand):
    help = 'Report image fields whose files are missing from storage (broken admin previews)'

    def add_arguments(self, parser):
        parser.add_argument('models', nargs='*', help='app_label.ModelName, defaults to all models')

    def get_models(self, labels):
        if not labels:
            return apps.get_models()
        try:
            return [apps.get_model(label) for label in labels]
        except (LookupError, ValueError) as e:
            raise CommandError(f'Unknown model: {e}')

    def handle(self, *args, **options):
        checked = 0
        missing = 0

        for model in self.get_models(options['models']):
            # proxies and multi-table children share rows with the concrete model that owns the field
            if model._meta.proxy:
                continue
            image_fields = [
                f for f in model._meta.get_fields()
                if isinstance(f, models.ImageField) and f.model is model
            ]
            if not image_fields:
                continue

            for obj in model._default_manager.all():
                for field in image_fields:
                    file = getattr(obj, field.name)
                    if not file:
                        continue
                    checked += 1
                    try:
                        exists = file.storage.exists(file.name)
                    except SuspiciousFileOperation:
                        missing += 1
                        self.stdout.write(
                            self.style.WARNING(f'{model.__name__} #{obj.pk} {field.name}: unsafe path {file.name}')
                        )
                        continue
                    if not exists:
                        missing += 1
                        self.stdout.write(
                            self.style.WARNING(f'{model.__name__} #{obj.pk} {field.name}: missing {file.name}')
                        )

        self.stdout.write(
            self.style.SUCCESS(f'Checked {checked} images, {missing} missing')
        )
