from __future__ import annotations
import argparse, json, sys
from emoji_backend import Engine, CorpusConfigError
from . import format_row, rows_to_dicts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Emoji picker CLI (Engine-backed)")
    p.add_argument("--corpus", default=None, help="Corpus file (description<TAB>glyph); bundled data if omitted")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            eng.build(args.corpus, verbose=args.verbose)
        except (CorpusConfigError, FileNotFoundError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        def run_query(q: str):
            result, rows, _ = eng.search(q)
            if args.json:
                print(json.dumps({"query": result.query, "count": len(result), "rows": rows_to_dicts(rows)},
                                 ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            print(f"{len(result)} matches, {len(rows)} rows")
            for row in rows:
                print(format_row(row))

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit). ':copy ROW COL' prints the glyph of a slot.")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                if q.startswith(":copy"):
                    parts = q.split()
                    try:
                        row, col = int(parts[1]), int(parts[2])
                    except (IndexError, ValueError):
                        print("usage: :copy ROW COL"); continue
                    glyph = eng.activate(row, col)
                    print(glyph if glyph is not None else "(empty slot)")
                    continue
                run_query(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
