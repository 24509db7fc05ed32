# src/hoststoggle/__main__.py
from hoststoggle.cli import main

if __name__ == "__main__":
    main()
