"""Main entry point for the Character Style Customizer"""
from .cli import cli


def main():
    cli(prog_name="charstyle")


if __name__ == "__main__":
    main()
