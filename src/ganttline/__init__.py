# SPDX-License-Identifier: MIT

import logging

from ganttline.cleanup import register_cleanup
from ganttline.initialize import initialize
from ganttline.terminal.app import run

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
