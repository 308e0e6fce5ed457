"""
Byte Package Builder - Editor Main

Command-line entry point for the editor application.

Usage:
    byte-package-builder [--config PATH] [-v]

The session and presets are kept in ~/.config/byte-package-builder/config.json
unless --config or the BYTEPACK_CONFIG environment variable points elsewhere.
"""

import argparse
import logging
import sys

from bytepack.formats.config_store import CONFIG_ENV_VAR, ConfigStore

from .application import EditorApplication


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="byte-package-builder",
        description="Assemble framed byte packages (start byte, payload, CRC-8)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  byte-package-builder
  byte-package-builder --config ./packages.json
  {CONFIG_ENV_VAR}=/tmp/packages.json byte-package-builder -v
""",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=f"Session/preset JSON file (default: ${CONFIG_ENV_VAR} or "
        "~/.config/byte-package-builder/config.json)",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the editor."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = ConfigStore(args.config)
    if store.path.exists() and not store.path.is_file():
        print(f"Error: config path is not a file: {store.path}")
        sys.exit(1)

    app = EditorApplication(store)
    app.run()


if __name__ == "__main__":
    main()
