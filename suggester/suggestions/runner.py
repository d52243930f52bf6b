"""CLI runner: print the suggested components and snippet for a description."""
from __future__ import annotations

import argparse
import json
from typing import List, Optional

from suggester.logging.event_log import configure_logging
from suggester.suggestions.service import SuggestionService


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Suggest Nova React components for a UI description")
    parser.add_argument("query", nargs="+", help="Free-text description, e.g. 'login form'")
    parser.add_argument("--json", action="store_true", help="Emit a JSON object instead of plain text")
    args = parser.parse_args(argv)
    configure_logging("WARNING")

    result = SuggestionService().suggest(" ".join(args.query), record=False)
    if args.json:
        print(json.dumps(result.model_dump(by_alias=True, exclude={"record_id"}), ensure_ascii=False, indent=2))
        return
    print("Components: " + ", ".join(result.components))
    print()
    print(result.snippet)


if __name__ == "__main__":
    main()
