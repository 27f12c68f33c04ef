"""Allow ``python -m json_flattener``."""

from .cli import main

main()
