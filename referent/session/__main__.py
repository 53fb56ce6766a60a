"""Entry point for running the console session as a module.

Allows running with: python -m referent.session
"""

from referent.session.console import main

if __name__ == "__main__":
    main()
