"""Build a command catalog out of the tool's help output.

The help text follows the usual layout of Go CLI tools::

    Available Commands:
      base64-encode  Encode your text to Base64
      md5            Get the MD5 checksum of your text

    Flags:
      -h, --help   help for sttr

Each command line is classified with keyword heuristics. Lines that don't look
like a command are skipped, so parsing never fails.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .models import Catalog, CommandEntry, sorted_catalog

__all__ = [
    "CLASSIFICATION_RULES",
    "COMMANDS_MARKER",
    "FALLBACK_CATEGORY",
    "FLAGS_MARKER",
    "ClassificationRule",
    "classify",
    "derive_label",
    "iter_command_lines",
    "parse_help",
]

COMMANDS_MARKER = "Available Commands:"
FLAGS_MARKER = "Flags:"
FALLBACK_CATEGORY = "Other"

_COMMAND_LINE = re.compile(r"^\s+([a-zA-Z0-9.\-]+)\s+(.+)$")
_LABEL_SEPARATORS = re.compile(r"[-_]")


class ClassificationRule(NamedTuple):
    """Put a command in `category` when `field` contains any of `keywords`."""

    category: str
    field: str  # "token" or "description"
    keywords: tuple[str, ...]

    def matches(self, token: str, description: str) -> bool:
        """Check the rule against lowercased `token` and `description`."""
        haystack = token if self.field == "token" else description
        return any(keyword in haystack for keyword in self.keywords)


# Evaluated in order, first match wins
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("Encode/Decode", "token", ("encode", "decode")),
    ClassificationRule("Hash", "description", ("hash", "checksum", "digest")),
    ClassificationRule("String Case", "token", ("case", "upper", "lower", "snake", "camel", "slug")),
    ClassificationRule("Lines", "token", ("lines",)),
    ClassificationRule("Format", "token", ("json", "yaml", "xml")),
    ClassificationRule("Extract", "token", ("extract",)),
    ClassificationRule("Count", "token", ("count",)),
    ClassificationRule("Color", "token", ("color", "rgb", "hex")),
    ClassificationRule("Lines", "token", ("sort", "unique", "shuffle", "reverse")),
)


def derive_label(token: str) -> str:
    """Make a title out of a command token.

    Eg:
        derive_label("ascii85-decode") == "Ascii85 Decode"
    """
    segments = [segment for segment in _LABEL_SEPARATORS.split(token) if segment]
    return " ".join(segment[0].upper() + segment[1:] for segment in segments)


def classify(token: str, description: str) -> str:
    """Return the category of a command."""
    token = token.lower()
    description = description.lower()
    for rule in CLASSIFICATION_RULES:
        if rule.matches(token, description):
            return rule.category
    return FALLBACK_CATEGORY


def iter_command_lines(help_text: str) -> list[tuple[str, str]]:
    """Extract the raw (token, description) pairs of the commands section."""
    pairs: list[tuple[str, str]] = []
    in_commands = False
    for line in help_text.splitlines():
        stripped = line.strip()
        if not in_commands:
            in_commands = stripped.startswith(COMMANDS_MARKER)
            continue
        if not stripped or stripped.startswith(FLAGS_MARKER):
            in_commands = False
            continue
        match = _COMMAND_LINE.match(line)
        if match:
            pairs.append((match.group(1), match.group(2).strip()))
    return pairs


def parse_help(help_text: str) -> Catalog:
    """Parse the help output into a catalog.

    Categories appear in the order they are first seen, entries are sorted by label.
    Returns an empty catalog when no command could be found.
    """
    catalog: Catalog = {}
    for token, description in iter_command_lines(help_text or ""):
        entry = CommandEntry(label=derive_label(token), command=token, description=description)
        catalog.setdefault(classify(token, description), []).append(entry)
    return sorted_catalog(catalog)
