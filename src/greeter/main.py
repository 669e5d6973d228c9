"""Main entry point for the greeter project."""

from loguru import logger

GREETING = "Hello, world!"


def greet() -> str:
    """Return the fixed greeting."""
    return GREETING


def main() -> None:
    """Main function."""
    message = greet()
    logger.debug("Printing greeting")
    print(message)


if __name__ == "__main__":
    main()
