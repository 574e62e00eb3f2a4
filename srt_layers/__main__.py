"""Package entry point for ``python -m srt_layers``.

WHY: Users run the importer as ``python -m srt_layers captions.srt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates straight to the CLI's main() function.
"""

from srt_layers.cli import main

if __name__ == "__main__":
    main()
