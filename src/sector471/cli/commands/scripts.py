"""Scripts inspection command."""

from __future__ import annotations

import argparse
import sys

from sector471.models.script_store import ScriptStore


def cmd_scripts(args: argparse.Namespace) -> int:
    """Load a scripts file and print its texts."""
    store = ScriptStore(args.path)
    if not store.loaded:
        print(f"Error: {store.error_message}", file=sys.stderr)
        return 1

    scripts = store.scripts
    print(f"Scripts: {args.path}")
    print(f"  universal.quoteText:  {scripts.universal.quote_text}")
    print(f"  earth.dialogueText:   {scripts.earth.dialogue_text}")
    print(f"  earth.topLeftText:    {scripts.earth.top_left_text}")
    print(f"  earth.thirdText:      {scripts.earth.third_text}")
    return 0
