"""Argument definitions: provider selection and credential overrides.

Every override is optional. With ``--provider`` the values replace the
registry record's fields only when non-empty; without it they are the whole
configuration.
"""

from __future__ import annotations

import argparse

from ..spec import MERGE_MODES


def add_credential_args(p: argparse.ArgumentParser) -> None:
    creds = p.add_argument_group("Provider")
    creds.add_argument(
        "-p",
        "--provider",
        help="Provider id from providers.json (see `claudex providers`)",
    )
    creds.add_argument("-k", "--api-key", help="API key (ANTHROPIC_API_KEY)")
    creds.add_argument("-u", "--base-url", help="API base URL (ANTHROPIC_BASE_URL)")
    creds.add_argument(
        "-t", "--auth-token", help="Auth token (ANTHROPIC_AUTH_TOKEN)"
    )
    creds.add_argument("-m", "--model", help="Model (ANTHROPIC_MODEL)")
    creds.add_argument(
        "--small-fast-model",
        help="Background model (ANTHROPIC_SMALL_FAST_MODEL)",
    )
    creds.add_argument(
        "--merge-mode",
        choices=list(MERGE_MODES),
        help="How env keys are rewritten (default: CLAUDEX_MERGE_MODE or strict)",
    )


__all__ = ["add_credential_args"]
