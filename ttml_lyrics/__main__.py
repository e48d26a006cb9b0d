"""Package entry point for ``python -m ttml_lyrics``.

WHY: Users run the converter as ``python -m ttml_lyrics convert song.ttml``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from ttml_lyrics.cli import main

if __name__ == "__main__":
    main()
