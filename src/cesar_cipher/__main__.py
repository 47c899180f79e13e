"""Main entry point for the cesar_cipher package."""
from cesar_cipher.cli import main


if __name__ == "__main__":
    main()
