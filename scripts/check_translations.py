"""Translation catalog check -- report keys missing from each language.

Usage:
    python scripts/check_translations.py
    python scripts/check_translations.py --language fr --output missing.json
"""

from __future__ import annotations

import argparse
import json
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from qcs.core.i18n import CATALOGS, DEFAULT_LANGUAGE, missing_keys


def build_report(languages: list[str] | None = None) -> dict:
    missing = missing_keys(CATALOGS, DEFAULT_LANGUAGE)
    selected = languages or [lang for lang in CATALOGS if lang != DEFAULT_LANGUAGE]
    return {
        "default": DEFAULT_LANGUAGE,
        "num_keys": len(CATALOGS[DEFAULT_LANGUAGE]),
        "languages": {
            lang: {
                "known": lang in CATALOGS,
                "missing": missing.get(lang, []),
            }
            for lang in selected
        },
    }


def main():
    parser = argparse.ArgumentParser(description="Check UI translation catalogs")
    parser.add_argument("--language", action="append", default=None,
                        help="Language code to check (repeatable, default: all)")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the report as JSON to this file")
    args = parser.parse_args()

    report = build_report(args.language)

    print(f"Default catalog '{report['default']}': {report['num_keys']} keys")
    failed = False
    for lang, info in report["languages"].items():
        if not info["known"]:
            print(f"  {lang}: no such catalog")
            failed = True
        elif info["missing"]:
            print(f"  {lang}: {len(info['missing'])} missing")
            for key in info["missing"]:
                print(f"    - {key}")
            failed = True
        else:
            print(f"  {lang}: complete")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
        print(f"\nResults saved to {args.output}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
