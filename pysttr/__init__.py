"""pysttr - run the sttr text transformation utility on a selection.

Discovers the commands supported by the installed `sttr` binary, caches them
as a categorized catalog and substitutes the transformed text in place.
"""
