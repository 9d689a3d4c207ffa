"""Command-line interface."""
from circlefield.main import main

if __name__ == "__main__":
    main()
