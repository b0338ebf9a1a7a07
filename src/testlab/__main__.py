"""Allow `python -m testlab`."""

from testlab.cli import main

if __name__ == "__main__":
    main()
