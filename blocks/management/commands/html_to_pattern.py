"""
Management command to convert HTML files to PHP block pattern files.

Each ``name.html`` becomes ``name.php``: a pattern header derived from the
file name followed by the block markup of the HTML.
"""

import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from blocks.conversion.pattern_file import html_to_pattern
from blocks.management.files import get_theme_dir, resolve_path

logger = logging.getLogger(__name__)


def _split_list(value):
    return [item.strip() for item in value.split(',') if item.strip()] if value else []


class Command(BaseCommand):
    help = 'Convert HTML files to PHP block pattern files'

    def add_arguments(self, parser):
        parser.add_argument(
            'input',
            help='Input HTML file or directory',
        )
        parser.add_argument(
            '-o',
            '--output',
            default='patterns',
            help='Output directory (default: patterns)',
        )
        parser.add_argument(
            '-p',
            '--pattern',
            default='**/*.html',
            help='Glob pattern for HTML files in a directory (default: **/*.html)',
        )
        parser.add_argument(
            '--namespace',
            help='Pattern namespace (e.g. "mytheme")',
        )
        parser.add_argument(
            '--categories',
            help='Pattern categories (comma-separated)',
        )
        parser.add_argument(
            '--keywords',
            help='Pattern keywords (comma-separated)',
        )
        parser.add_argument(
            '--description',
            default='',
            help='Pattern description',
        )
        parser.add_argument(
            '--viewport-width',
            type=int,
            help='Viewport width for the pattern preview',
        )

    def handle(self, *args, **options):
        theme_dir = get_theme_dir()
        input_path = resolve_path(options['input'], theme_dir)
        output_dir = resolve_path(options['output'], theme_dir)

        if not input_path.exists():
            raise CommandError(f'Path not found: {input_path}')

        if input_path.is_dir():
            files = sorted(p for p in input_path.glob(options['pattern']) if p.is_file())
        else:
            files = [input_path]

        if not files:
            self.stdout.write(self.style.WARNING('No HTML files found'))
            return

        pattern_options = {
            'namespace': options.get('namespace'),
            'categories': _split_list(options.get('categories')),
            'keywords': _split_list(options.get('keywords')),
            'description': options.get('description') or '',
            'viewport_width': options.get('viewport_width'),
        }

        self.stdout.write(f'Input: {input_path}')
        self.stdout.write(f'Output: {output_dir}\n')

        success_count = 0
        error_count = 0

        for source_file in files:
            if input_path.is_dir():
                relative = source_file.relative_to(input_path)
            else:
                relative = Path(source_file.name)
            dest_file = output_dir / relative.with_suffix('.php')

            try:
                html = source_file.read_text(encoding='utf-8')
                php = html_to_pattern(html, source_file.stem, **pattern_options)

                dest_file.parent.mkdir(parents=True, exist_ok=True)
                dest_file.write_text(php, encoding='utf-8')
            except Exception as e:
                logger.debug(f'Failed to convert {source_file}', exc_info=True)
                self.stdout.write(self.style.ERROR(f'✗ {source_file.name}: {e}'))
                error_count += 1
                continue

            self.stdout.write(f'✓ {source_file.name} → {dest_file.name}')
            success_count += 1

        self.stdout.write(self.style.SUCCESS(f'\nConverted {success_count} file(s)'))
        if error_count:
            self.stdout.write(self.style.ERROR(f'{error_count} error(s)'))
