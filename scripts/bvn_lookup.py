#!/usr/bin/env python3
"""
Mono SDK — Interactive BVN Lookup

Walks through the three-step BVN verification against the live Mono API:
initiate, pick an OTP channel, enter the OTP, print the verified details.

Usage:
    export MONO_SEC_KEY=test_sk_...
    python scripts/bvn_lookup.py [bvn]

Requires: httpx, pydantic
"""

from __future__ import annotations

import json
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from mono_sdk import MonoClient, VerificationMethod, VerificationResult

# ---------------------------------------------------------------------------
# Terminal output
# ---------------------------------------------------------------------------

_ANSI = {"bold": 1, "dim": 2, "red": 91, "green": 92, "cyan": 96}


def _paint(text: str, *styles: str) -> str:
    if not sys.stdout.isatty():
        return text
    codes = ";".join(str(_ANSI[s]) for s in styles)
    return f"\033[{codes}m{text}\033[0m"


def heading(title: str, colour: str = "cyan"):
    rule = _paint("-" * 60, colour)
    print(f"\n{rule}\n {_paint(title, 'bold', colour)}\n{rule}\n")


def say(text: str, tag: str = "", *styles: str):
    prefix = f"{_paint(tag, 'bold', *styles)} " if tag else ""
    print(f"  {prefix}{text if tag else _paint(text, 'dim')}")


def report(result: VerificationResult) -> bool:
    if result.success:
        say(result.message or "successful", "OK", "green")
    else:
        say(f"[{result.outcome.value}] {result.message}", "FAIL", "red")
    return result.success


# ---------------------------------------------------------------------------
# Flow
# ---------------------------------------------------------------------------

def choose_method(result: VerificationResult) -> tuple[VerificationMethod, str | None]:
    for i, m in enumerate(result.methods, start=1):
        print(f"    {i}. {m.method:<16} {m.hint}")
    print(f"    {len(result.methods) + 1}. {VerificationMethod.ALTERNATE_PHONE.value:<16} (enter a number)")

    while True:
        raw = input("  Channel #: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(result.methods) + 1:
            break
        say("Pick one of the numbers above.")

    idx = int(raw)
    if idx == len(result.methods) + 1:
        return VerificationMethod.ALTERNATE_PHONE, input("  Phone number: ").strip()
    return result.methods[idx - 1].channel, None


def main():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    bvn = sys.argv[1] if len(sys.argv) > 1 else input("BVN: ").strip()

    with MonoClient() as mono:
        bvn_lookup = mono.lookup.bvn
        heading("MONO BVN LOOKUP")

        say(f"Initiating lookup at {mono.url('lookup/bvn/initiate')}", "[1/3]", "cyan")
        started = bvn_lookup.initiate(bvn)
        if not report(started):
            return 1
        say(f"session_id={started.session_id}")

        say("Choose where the OTP should be sent", "[2/3]", "cyan")
        method, phone = choose_method(started)
        chosen = bvn_lookup.verify(method, started.session_id, phone_number=phone)
        if not report(chosen):
            return 1

        say("Fetch verified details", "[3/3]", "cyan")
        otp = input("  OTP: ").strip()
        details = bvn_lookup.fetch_details(otp, started.session_id)
        if not report(details):
            return 1

        heading("VERIFIED DETAILS", "green")
        print(json.dumps(details.details, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
