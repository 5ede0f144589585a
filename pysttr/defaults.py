"""Built-in catalog, used until a help output has been parsed successfully."""

from .models import Catalog, CommandEntry

__all__ = ["DEFAULT_CATALOG", "default_catalog"]


def _entries(*rows: tuple[str, str, str]) -> list[CommandEntry]:
    return [CommandEntry(label=label, command=command, description=description) for label, command, description in rows]


DEFAULT_CATALOG: Catalog = {
    "Encode/Decode": _entries(
        ("ASCII85 Encode", "ascii85-encode", "Encode text to ASCII85"),
        ("ASCII85 Decode", "ascii85-decode", "Decode ASCII85 text"),
        ("Base32 Encode", "base32-encode", "Encode text to Base32"),
        ("Base32 Decode", "base32-decode", "Decode Base32 text"),
        ("Base64 Encode", "base64-encode", "Encode text to Base64"),
        ("Base64 Decode", "base64-decode", "Decode Base64 text"),
        ("Base85 Encode", "base85-encode", "Encode text to Base85"),
        ("Base85 Decode", "base85-decode", "Decode Base85 text"),
        ("Base64 URL Encode", "base64url-encode", "Encode text to Base64 URL"),
        ("Base64 URL Decode", "base64url-decode", "Decode Base64 URL text"),
        ("HTML Encode", "html-encode", "Escape HTML entities"),
        ("HTML Decode", "html-decode", "Unescape HTML entities"),
        ("URL Encode", "url-encode", "Encode URL entities"),
        ("URL Decode", "url-decode", "Decode URL entities"),
        ("ROT13 Encode", "rot13-encode", "Encode text to ROT13"),
        ("Morse Encode", "morse-encode", "Encode text to Morse code"),
        ("Morse Decode", "morse-decode", "Decode Morse code"),
        ("Hex Encode", "hex-encode", "Encode text to Hex"),
        ("Hex Decode", "hex-decode", "Decode Hex to text"),
    ),
    "Hash": _entries(
        ("MD5", "md5", "Generate MD5 hash"),
        ("SHA1", "sha1", "Generate SHA1 hash"),
        ("SHA256", "sha256", "Generate SHA256 hash"),
        ("SHA512", "sha512", "Generate SHA512 hash"),
        ("BCrypt", "bcrypt", "Generate BCrypt hash"),
        ("XXH64", "xxh64", "Generate XXH64 hash"),
    ),
    "String Case": _entries(
        ("camelCase", "camel", "Transform to camelCase"),
        ("PascalCase", "pascal", "Transform to PascalCase"),
        ("kebab-case", "kebab", "Transform to kebab-case"),
        ("snake_case", "snake", "Transform to snake_case"),
        ("slug-case", "slug", "Transform to slug-case"),
        ("UPPER CASE", "upper", "Transform to UPPER CASE"),
        ("lower case", "lower", "Transform to lower case"),
        ("Title Case", "title", "Transform to Title Case"),
        ("Reverse Text", "reverse", "Reverse text"),
    ),
    "Lines": _entries(
        ("Count Lines", "count-lines", "Count number of lines"),
        ("Reverse Lines", "reverse-lines", "Reverse line order"),
        ("Shuffle Lines", "shuffle-lines", "Shuffle lines randomly"),
        ("Sort Lines", "sort-lines", "Sort lines alphabetically"),
        ("Unique Lines", "unique-lines", "Get unique lines"),
        ("Number Lines", "number-lines", "Add line numbers"),
    ),
    "Format": _entries(
        ("Format JSON", "json", "Format text as JSON"),
        ("JSON to YAML", "json-yaml", "Convert JSON to YAML"),
        ("YAML to JSON", "yaml-json", "Convert YAML to JSON"),
        ("JSON Escape", "json-escape", "Escape JSON string"),
        ("JSON Unescape", "json-unescape", "Unescape JSON string"),
        ("Markdown to HTML", "markdown-html", "Convert Markdown to HTML"),
    ),
    "Extract": _entries(
        ("Extract Emails", "extract-emails", "Extract email addresses"),
        ("Extract URLs", "extract-urls", "Extract URLs"),
        ("Extract IPs", "extract-ip", "Extract IP addresses"),
    ),
    "Count": _entries(
        ("Count Characters", "count-chars", "Count characters"),
        ("Count Words", "count-words", "Count words"),
        ("Count Lines", "count-lines", "Count lines"),
    ),
    "Color": _entries(
        ("Hex to RGB", "hex-rgb", "Convert hex color to RGB"),
    ),
    "Other": _entries(
        ("Remove Spaces", "remove-spaces", "Remove all spaces and newlines"),
        ("Remove Newlines", "remove-newlines", "Remove all newlines"),
        ("Escape Quotes", "escape-quotes", "Escape single and double quotes"),
        ("Zero Pad", "zeropad", "Pad number with zeros"),
    ),
}


def default_catalog() -> Catalog:
    """Return a fresh copy of the built-in catalog."""
    return {category: list(entries) for category, entries in DEFAULT_CATALOG.items()}
