"""Test helpers: a fake sttr executable and an in-memory editor."""

from pathlib import Path

from pysttr.editor import Editor, QuickPickItem, Selection

SAMPLE_HELP = """sttr is command line software that allows you to quickly run various transformation operations on the string.

Usage:
  sttr [flags]
  sttr [command]

Available Commands:
  ascii85-decode   Decode your text to Ascii85 ( Base85 ) text
  base64-encode    Encode your text to Base64
  completion       Generate the autocompletion script for the specified shell
  count-lines      Count the number of lines in your text
  hex-rgb          Convert a #hex-color code to RGB
  md5              Get the MD5 checksum of your text
  sort-lines       Sort lines alphabetically
  upper            Transform your text to UPPER CASE

Flags:
  -h, --help      help for sttr
  -v, --version   version for sttr

Use "sttr [command] --help" for more information about a command.
"""

FAKE_STTR = f"""case "$1" in
  -h)
    cat <<'HELP'
{SAMPLE_HELP}HELP
    ;;
  upper)
    tr '[:lower:]' '[:upper:]'
    ;;
  echo-arg)
    cat >/dev/null
    printf '%s\\n\\n' "$1"
    ;;
  fail)
    cat >/dev/null
    echo "bad input" >&2
    exit 2
    ;;
  *)
    cat >/dev/null
    echo "unknown command $1" >&2
    exit 1
    ;;
esac
"""


def make_script(path: Path, body: str) -> Path:
    "Write an executable shell script"
    path.write_text(f"#!/bin/sh\n{body}")
    path.chmod(0o755)
    return path


class FakeEditor(Editor):
    """Records every interaction, answers with preset values."""

    def __init__(self, selection: Selection | None = None, pick: str | None = None, action: str | None = None) -> None:
        self.selection = selection
        self.pick = pick
        self.action = action
        self.replaced: list[tuple[Selection, str]] = []
        self.errors: list[tuple[str, tuple[str, ...]]] = []
        self.infos: list[str] = []
        self.documents: list[tuple[str, str]] = []
        self.opened: list[str] = []
        self.menus: list[list[QuickPickItem]] = []
        self.progress: list[str] = []

    def get_selection(self):
        return self.selection

    async def replace_selection(self, selection, text):
        self.replaced.append((selection, text))

    async def show_quick_pick(self, items, placeholder=""):
        self.menus.append(items)
        for item in items:
            if not item.is_separator and item.command == self.pick:
                return item
        return None

    async def show_error(self, message, *actions):
        self.errors.append((message, actions))
        return self.action

    async def show_info(self, message):
        self.infos.append(message)

    async def open_document(self, content, language="markdown"):
        self.documents.append((content, language))

    async def open_external(self, url):
        self.opened.append(url)

    async def with_progress(self, title, task):
        self.progress.append(title)
        return await task
