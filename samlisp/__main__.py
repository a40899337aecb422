"""Entry point for `python -m samlisp`."""

from .frontend import main

if __name__ == '__main__':
    main()
