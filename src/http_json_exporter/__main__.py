# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Allow ``python -m http_json_exporter``."""

from http_json_exporter.cli.exporter_cli import main

if __name__ == "__main__":
    main()
