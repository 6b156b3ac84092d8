"""
Management command to convert source HTML files to block markup.

    python manage.py html_to_blocks src/parts/header.html
    python manage.py html_to_blocks src/parts --all
    python manage.py html_to_blocks src/pages/home.html --output=pages --context=page
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from blocks.conversion import html_to_block_markup
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
    help = 'Convert HTML files to block markup'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='Path to an HTML file or a directory of HTML files',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Convert all .html files in the directory',
        )
        parser.add_argument(
            '--output',
            help="Output directory (default: input path without the 'src/' prefix)",
        )
        parser.add_argument(
            '--context',
            choices=['content', 'page', 'pattern'],
            default='content',
            help='Destination context; selects the backslash escaping policy (default: content)',
        )
        parser.add_argument(
            '--text-content',
            action='store_true',
            help='Keep the text of leaf elements in the blocks',
        )

    def handle(self, *args, **options):
        theme_dir = get_theme_dir()
        input_path = resolve_path(options['path'], theme_dir)
        custom_output = options.get('output')
        double_escape = resolve_double_escape(context=options.get('context'))
        text_content = options.get('text_content')

        files = collect_files(input_path, options.get('all'), '.html')

        success_count = 0
        error_count = 0

        for source_file in files:
            if custom_output:
                output_dir = resolve_path(custom_output, theme_dir)
            else:
                output_dir = default_output_dir(source_file, theme_dir, to_source=False)
            dest_file = output_dir / source_file.name

            try:
                if dest_file.resolve() == source_file.resolve():
                    raise CommandError('Output would overwrite the source file; use --output')

                html = source_file.read_text(encoding='utf-8')
                markup = html_to_block_markup(
                    html,
                    double_escape=double_escape,
                    text_content=text_content,
                )

                output_dir.mkdir(parents=True, exist_ok=True)
                dest_file.write_text(markup + '\n', encoding='utf-8')
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
            self.style.SUCCESS(f'Converted {success_count} file(s) from HTML to block markup')
        )
