"""Allow ``python -m social_post_generator``."""

from .cli import main

if __name__ == "__main__":
    main()
