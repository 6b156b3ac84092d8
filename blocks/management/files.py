"""
File helpers shared by the conversion management commands.
"""

from pathlib import Path
from typing import List

from django.conf import settings
from django.core.management.base import CommandError

SOURCE_DIR = 'src'


def get_theme_dir() -> Path:
    """Directory relative paths are resolved against (settings.BLOCKS_THEME_DIR or cwd)."""
    theme_dir = getattr(settings, 'BLOCKS_THEME_DIR', None)
    return Path(theme_dir) if theme_dir else Path.cwd()


def resolve_path(path, base_dir: Path) -> Path:
    path = Path(path)
    return path if path.is_absolute() else base_dir / path


def collect_files(input_path: Path, convert_all: bool, suffix: str) -> List[Path]:
    """
    Return the files a command should convert.

    A directory is only accepted with ``--all`` and yields its direct
    children with the given suffix, sorted by name.
    """
    if not input_path.exists():
        raise CommandError(f'Path not found: {input_path}')

    if input_path.is_dir():
        if not convert_all:
            raise CommandError('Path is a directory. Use --all to convert all files.')
        files = sorted(p for p in input_path.glob(f'*{suffix}') if p.is_file())
        if not files:
            raise CommandError(f'No {suffix} files found in directory: {input_path}')
        return files

    if input_path.suffix != suffix:
        raise CommandError(f'File must be a {suffix} file: {input_path}')
    return [input_path]


def default_output_dir(source_file: Path, base_dir: Path, to_source: bool) -> Path:
    """
    Mirror a file between the theme and its ``src/`` tree.

    ``src/parts/header.html`` maps to ``parts/`` and, with ``to_source``,
    ``parts/header.html`` (or ``src/parts/header.html``) maps to
    ``src/parts/``. With ``to_source``, files outside the theme directory go
    to ``src/`` itself; otherwise they stay where they are.
    """
    try:
        relative = source_file.relative_to(base_dir)
    except ValueError:
        return base_dir / SOURCE_DIR if to_source else source_file.parent

    parts = relative.parent.parts
    if parts and parts[0] == SOURCE_DIR:
        parts = parts[1:]
    relative_dir = Path(*parts)

    if to_source:
        return base_dir / SOURCE_DIR / relative_dir
    return base_dir / relative_dir


def display_path(path: Path, base_dir: Path) -> str:
    try:
        return str(path.relative_to(base_dir))
    except ValueError:
        return str(path)
