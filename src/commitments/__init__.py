# SPDX-License-Identifier: MIT

from commitments.cleanup import register_cleanup
from commitments.initialize import initialize
from commitments.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
