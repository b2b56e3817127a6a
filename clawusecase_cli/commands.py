"""
Command implementations for clawusecase-cli.
Each cmd_*() function receives the normalized argument mapping and a
UsecaseClient, and handles one CLI command.

Business logic lives in client.py (UsecaseClient). These thin wrappers
handle progress messages and output.
"""

from clawusecase_cli.exceptions import CliError
from clawusecase_cli.formatters import info, output


def cmd_submit(args, client):
    record, stored = client.prepare(args)
    info("Submitting use case...")
    output(client.send(record, stored))


def cmd_get_credential(args, client):
    token = args.get("token")
    if not isinstance(token, str) or not token.strip():
        raise CliError(
            "[ERROR] Missing --token argument\nUsage: clawusecase get-credential --token abc123"
        )
    info("Retrieving OAuth credential...")
    output(client.get_credential(token.strip()))
