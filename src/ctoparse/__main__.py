# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Allow running the CLI as ``python -m ctoparse``."""

from ctoparse.cli.main import main

if __name__ == "__main__":
    main()
