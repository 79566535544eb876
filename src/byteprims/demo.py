# src/byteprims/demo.py
import argparse
import json
import os
import re
import sys


def _b(text: str) -> bytes:
    # CLI args are text; surrogateescape keeps undecodable argv bytes intact
    return os.fsencode(text)


def _show(value):
    if isinstance(value, (bytes, bytearray)):
        return value.decode("latin-1")
    if isinstance(value, (list, tuple, frozenset, set)):
        return [_show(v) for v in value]
    return value


def main(argv=None):
    """CLI demo: run one byte-string primitive and print the result as JSON."""
    from . import primitives as P
    from .engine.utils import log as dbg

    parser = argparse.ArgumentParser(
        prog="byteprims-demo",
        description="Run a byte-string primitive: distance, align, split, sub.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="op", required=True)

    p = sub.add_parser("distance", help="Levenshtein distance")
    p.add_argument("a")
    p.add_argument("b")

    p = sub.add_parser("align", help="Smith-Waterman local alignments")
    p.add_argument("a")
    p.add_argument("b")
    p.add_argument("--min-length", type=int, default=0, dest="min_length")
    p.add_argument("--variant", default="basic")
    p.add_argument("--single", action="store_true", help="Best match only")

    p = sub.add_parser("split", help="Split by regex")
    p.add_argument("text")
    p.add_argument("pattern")
    p.add_argument("--keep", action="store_true", help="Keep separators")
    p.add_argument("--max", type=int, default=0, dest="max_splits")

    p = sub.add_parser("sub", help="Substitute regex matches")
    p.add_argument("text")
    p.add_argument("pattern")
    p.add_argument("replacement")
    p.add_argument("--all", action="store_true", dest="all_")

    args = parser.parse_args(argv)

    if args.debug:
        os.environ["BYTEPRIMS_DEBUG_TOPICS"] = "all"
        dbg.reload_topics()
    dbg.debug(f"op={args.op}", topic="demo")

    try:
        if args.op == "distance":
            result = {"distance": P.levenshtein(_b(args.a), _b(args.b))}
        elif args.op == "align":
            a, b = _b(args.a), _b(args.b)
            matches = P.local_alignments(
                a,
                b,
                min_length=args.min_length,
                variant=args.variant,
                mode="single" if args.single else "multiple",
            )
            result = [
                {
                    "score": m.score,
                    "a": [m.offset1, m.length1, _show(m.slice1(a))],
                    "b": [m.offset2, m.length2, _show(m.slice2(b))],
                }
                for m in matches
            ]
        elif args.op == "split":
            pat = re.compile(_b(args.pattern))
            result = _show(P.split(_b(args.text), pat, args.keep, args.max_splits))
        else:
            pat = re.compile(_b(args.pattern))
            result = _show(P.substitute(_b(args.text), pat, _b(args.replacement), args.all_))
        dbg.debug(f"result={result!r}", topic="demo")
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (P.ByteprimsError, ValueError, re.error) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
