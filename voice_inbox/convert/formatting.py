"""Note formatting for transcriptions.

Pure functions that turn trimmed transcription text into an Obsidian note
and a filename. All time-dependent values are taken from the `now` argument,
so callers decide where the current time comes from.

Example output of generate_note_content("Buy milk.", "superwhisper", now):
    ---
    type: transcription
    created: 2026-01-28
    source: superwhisper
    template_version: 1
    areas: []
    projects: []
    summary: ""
    ---

    Buy milk.
"""

import math
from datetime import UTC, date, datetime

import frontmatter
import yaml
from pydantic import JsonValue

from voice_inbox.convert.models import DEFAULT_SOURCE, NoteFrontmatter

FILENAME_MARKER = "🎤"


class NoteDumper(yaml.SafeDumper):
    """SafeDumper that writes empty strings as "" rather than ''."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if not data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


NoteDumper.add_representer(str, _represent_str)


def generate_timestamp(now: datetime) -> str:
    """Format a human-readable timestamp for filenames.

    Args:
        now: Local time to format

    Returns:
        Timestamp like "2026-01-28 2-51pm" (12-hour clock, no leading
        zero on the hour, zero-padded minutes, lowercase meridiem)

    Examples:
        >>> generate_timestamp(datetime(2026, 1, 28, 14, 51))
        '2026-01-28 2-51pm'
        >>> generate_timestamp(datetime(2026, 1, 28, 0, 5))
        '2026-01-28 12-05am'
    """
    hour = now.hour % 12 or 12
    meridiem = "pm" if now.hour >= 12 else "am"
    return f"{now:%Y-%m-%d} {hour}-{now:%M}{meridiem}"


def generate_filename(now: datetime) -> str:
    """Build the note filename, e.g. "🎤 2026-01-28 2-51pm"."""
    return f"{FILENAME_MARKER} {generate_timestamp(now)}"


def generate_frontmatter(source: JsonValue, today: date) -> NoteFrontmatter:
    """Build the frontmatter for a transcription note created on `today`."""
    return NoteFrontmatter(created=today, source=source or DEFAULT_SOURCE)


def generate_note_content(text: str, source: JsonValue, now: datetime) -> str:
    """Assemble the complete note: frontmatter, a blank line, then the text.

    The text is trimmed before embedding and the note ends with a single
    newline. Keys keep their declared order (python-frontmatter would
    otherwise let PyYAML sort them) and values are written on one line
    without escaping non-ASCII characters.

    Args:
        text: Transcription text
        source: Value for the `source` frontmatter key
        now: Local time; its calendar date becomes `created`

    Returns:
        Full note content with YAML frontmatter
    """
    fm = generate_frontmatter(source, now.date())
    post = frontmatter.Post(text.strip())
    post.metadata = fm.to_yaml_dict()
    rendered = frontmatter.dumps(
        post, Dumper=NoteDumper, sort_keys=False, allow_unicode=True, width=math.inf
    )
    return rendered.rstrip() + "\n"


def format_iso_instant(now: datetime) -> str:
    """Format an instant as UTC ISO-8601 with milliseconds, e.g. 2026-01-28T14:51:03.120Z."""
    utc = now.astimezone(UTC)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
