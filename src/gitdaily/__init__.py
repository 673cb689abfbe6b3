# SPDX-License-Identifier: MIT

from gitdaily.cleanup import register_cleanup
from gitdaily.initialize import initialize
from gitdaily.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
