"""Allow `python -m pysttr`."""

from .command import main

main()
