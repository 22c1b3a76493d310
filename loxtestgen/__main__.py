# loxtestgen/__main__.py
from loxtestgen.cli import main

if __name__ == "__main__":
    main()
