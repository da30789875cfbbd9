"""Vaultjack CLI — run a single resource operation from the command line.

Usage examples::

    vaultjack --resource identity_entity_alias --id 1b5c... read
    vaultjack --resource terraform_cloud_secret_backend_role \\
        --attributes '{"backend": "tfc", "name": "ci", "organization": "acme"}' create
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``vaultjack`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="vaultjack",
        description="Declarative Vault resource CLI",
    )
    parser.add_argument(
        "--resource", "-r",
        required=True,
        choices=["terraform_cloud_secret_backend_role", "identity_entity_alias"],
        help="Resource type",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON config string (e.g. \'{"url":"https://vault:8200"}\')',
    )
    parser.add_argument(
        "--id", "-i",
        dest="resource_id",
        type=str,
        default="",
        help="Resource identity (role path or alias id)",
    )
    parser.add_argument(
        "--attributes", "-a",
        type=str,
        default="{}",
        help="JSON object with the declarative attributes",
    )
    parser.add_argument(
        "operation",
        choices=["create", "read", "update", "delete", "exists", "import"],
        help="Operation to perform",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, creates a resource handler via the resource factory,
    and runs the requested operation. The resulting state is printed as
    JSON; ``exists`` prints ``true``/``false`` and ``delete`` prints ``OK``.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config: dict[str, Any] = json.loads(ns.config)
    except json.JSONDecodeError as e:
        print(f"Invalid --config JSON: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        attributes: dict[str, Any] = json.loads(ns.attributes)
    except json.JSONDecodeError as e:
        print(f"Invalid --attributes JSON: {e}", file=sys.stderr)
        sys.exit(1)

    # Lazy-import to avoid loading hvac for --help
    from pydantic import ValidationError

    from vault.base import ResourceData
    from vault.base.exceptions import VaultjackError
    from vault.factory import resource_factory

    try:
        resource = resource_factory(ns.resource, config)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    data = ResourceData(attributes, id=ns.resource_id)
    try:
        if ns.operation == "import":
            data = resource.import_state(ns.resource_id)
            resource.read(data)
            result: Any = data.to_dict()
        elif ns.operation == "exists":
            result = resource.exists(data)
        elif ns.operation == "delete":
            resource.delete(data)
            result = None
        else:
            getattr(resource, ns.operation)(data)
            result = data.to_dict()
    except VaultjackError as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)

    if result is None:
        print("OK")
    else:
        print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
