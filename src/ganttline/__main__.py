# SPDX-License-Identifier: MIT

from ganttline import main

main()
