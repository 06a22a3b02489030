"""
Entry point: python -m ocproj [NAME | - | -c | -h]
"""

from .cli import main


if __name__ == "__main__":
    main()
