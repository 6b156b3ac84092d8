"""
Management command to convert markdown content files to block markup.

Content files may start with YAML frontmatter, which is dropped; the body is
rendered with Pandoc and serialized in the content context (double-escaped
backslashes, so code samples survive the trip into the database).
"""

import logging

from django.core.management.base import BaseCommand

from blocks.management.files import collect_files, display_path, get_theme_dir, resolve_path
from blocks.markdown import markdown_to_block_markup

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Convert markdown content files to block markup'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='Path to a markdown file or a directory of markdown files',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Convert all .md files in the directory',
        )
        parser.add_argument(
            '--output',
            help='Output directory (default: next to each markdown file)',
        )
        parser.add_argument(
            '--single-escape',
            action='store_true',
            help='Do not double-escape backslashes',
        )

    def handle(self, *args, **options):
        theme_dir = get_theme_dir()
        input_path = resolve_path(options['path'], theme_dir)
        custom_output = options.get('output')
        double_escape = False if options.get('single_escape') else None

        files = collect_files(input_path, options.get('all'), '.md')

        success_count = 0
        error_count = 0

        for source_file in files:
            if custom_output:
                output_dir = resolve_path(custom_output, theme_dir)
            else:
                output_dir = source_file.parent
            dest_file = output_dir / source_file.with_suffix('.html').name

            try:
                text = source_file.read_text(encoding='utf-8')
                markup = markdown_to_block_markup(text, double_escape=double_escape)

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
            self.style.SUCCESS(f'Converted {success_count} markdown file(s) to block markup')
        )
