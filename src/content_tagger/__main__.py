"""Allow `python -m content_tagger`."""

from .cli import main

main()
