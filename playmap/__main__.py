"""CLI entry point for playmap package.

Usage:
    python -m playmap fetch com.example.game --readme
    python -m playmap fetch com.example.game --file game.playmap --dest ./keymaps
    python -m playmap layout in.playmap out.playmap QWERTY AZERTY
"""

from .cli import main

if __name__ == "__main__":
    main()
