"""
HillCipher Entry Point

Allows running the command line interface via: python -m hillcipher
"""

from hillcipher.cli import main

if __name__ == "__main__":
    main()
