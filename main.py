"""Entry point for git-user CLI."""

from git_user.cli import cli_main


def main():
    """Launch the git-user CLI."""
    cli_main()


if __name__ == "__main__":
    main()
