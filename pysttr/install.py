"""Installation instructions for the sttr binary."""

import sys

from .constants import HOMEPAGE_URL, INSTALL_SCRIPT_URL, RELEASES_URL

__all__ = ["install_instructions"]

_GO_INSTALL = "go install github.com/abhimanyu003/sttr@latest"
_OUTRO = "After installation, run `pysttr refresh-commands` to load the available transformations."

_MACOS = f"""# Install STTR on macOS

## Homebrew (Recommended)
```bash
brew install abhimanyu003/sttr/sttr
```

## Quick Install Script
```bash
curl -sfL {INSTALL_SCRIPT_URL} | sh
```

## Go Install
```bash
{_GO_INSTALL}
```
"""

_LINUX = f"""# Install STTR on Linux

## Quick Install Script
```bash
curl -sfL {INSTALL_SCRIPT_URL} | sh
```

## Snap
```bash
sudo snap install sttr
```

## Arch Linux
```bash
yay -S sttr-bin
```

## Go Install
```bash
{_GO_INSTALL}
```
"""

_WINDOWS = f"""# Install STTR on Windows

## Winget
```cmd
winget install -e --id abhimanyu003.sttr
```

## Scoop
```powershell
scoop bucket add sttr https://github.com/abhimanyu003/scoop-bucket.git
scoop install sttr
```

## Webi
```powershell
curl.exe https://webi.ms/sttr | powershell
```

## Go Install
```cmd
{_GO_INSTALL}
```
"""

_GENERIC = f"""# Install STTR

## Go Install (Universal)
```bash
{_GO_INSTALL}
```

## Download Binary
Visit: {RELEASES_URL}
"""


def install_instructions(platform: str = sys.platform) -> str:
    """Return Markdown installation instructions for `platform` (a `sys.platform` value)."""
    if platform == "darwin":
        text = _MACOS
    elif platform.startswith("linux"):
        text = _LINUX
    elif platform == "win32":
        text = _WINDOWS
    else:
        text = _GENERIC
    return f"{text}\n{_OUTRO}\n\nProject homepage: {HOMEPAGE_URL}\n"
