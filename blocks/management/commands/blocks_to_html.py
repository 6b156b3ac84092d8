"""
Management command to convert block markup files back to source HTML.

    python manage.py blocks_to_html parts/header.html
    python manage.py blocks_to_html parts --all --output=src/parts
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from blocks.conversion import blocks_to_html, parse_block_markup
from blocks.conversion.config import resolve_double_escape
from blocks.management.files import (
    collect_files,
    default_output_dir,
    display_path,
    get_theme_dir,
    resolve_path,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Convert block markup files to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='Path to a block markup file or a directory of them',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Convert all .html files in the directory',
        )
        parser.add_argument(
            '--output',
            help="Output directory (default: input path prefixed with 'src/')",
        )
        parser.add_argument(
            '--context',
            choices=['content', 'page', 'pattern'],
            default='content',
            help='Context the markup was written for; selects how backslashes are read',
        )

    def handle(self, *args, **options):
        theme_dir = get_theme_dir()
        input_path = resolve_path(options['path'], theme_dir)
        custom_output = options.get('output')
        double_escaped = resolve_double_escape(context=options.get('context'))

        files = collect_files(input_path, options.get('all'), '.html')

        success_count = 0
        error_count = 0

        for source_file in files:
            if custom_output:
                output_dir = resolve_path(custom_output, theme_dir)
            else:
                output_dir = default_output_dir(source_file, theme_dir, to_source=True)
            dest_file = output_dir / source_file.name

            try:
                if dest_file.resolve() == source_file.resolve():
                    raise CommandError('Output would overwrite the source file; use --output')

                markup = source_file.read_text(encoding='utf-8')
                blocks = parse_block_markup(markup, double_escaped=double_escaped)
                html = blocks_to_html(blocks)

                output_dir.mkdir(parents=True, exist_ok=True)
                dest_file.write_text(html, encoding='utf-8')
            except Exception as e:
                logger.debug(f'Failed to convert {source_file}', exc_info=True)
                self.stdout.write(
                    self.style.ERROR(f'✗ {display_path(source_file, theme_dir)}: {e}')
                )
                error_count += 1
                continue

            self.stdout.write(
                f'✓ {display_path(source_file, theme_dir)} → {display_path(dest_file, theme_dir)}'
            )
            success_count += 1

        if error_count:
            self.stdout.write(self.style.WARNING(f'{error_count} file(s) failed'))
        self.stdout.write(
            self.style.SUCCESS(f'Converted {success_count} file(s) from block markup to HTML')
        )
