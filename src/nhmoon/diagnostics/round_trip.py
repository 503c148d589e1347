from __future__ import annotations

import argparse
import random

from nhmoon.core.dates import MAX_ORDINAL, MIN_ORDINAL, add_days, from_ordinal, to_ordinal
from nhmoon.core.errors import OutOfRangeError


def roundtrip_test(N: int, lo: int, hi: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        o = random.randint(lo, hi)
        d = from_ordinal(o)
        back = to_ordinal(d)
        ok = back == o
        # neighbouring days must be consecutive calendar dates
        if ok and o < MAX_ORDINAL:
            nxt = add_days(d, 1)
            ok = nxt > d and to_ordinal(nxt) == o + 1
        if not ok:
            failures += 1
            print("\nFAIL")
            print("ordinal:", o)
            print("date:", d)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def edge_test() -> int:
    failures = 0
    for o in (MIN_ORDINAL, MIN_ORDINAL + 1, MAX_ORDINAL - 1, MAX_ORDINAL):
        if to_ordinal(from_ordinal(o)) != o:
            print("FAIL edge:", o)
            failures += 1
    for o in (MIN_ORDINAL - 1, MAX_ORDINAL + 1):
        try:
            from_ordinal(o)
        except OutOfRangeError:
            continue
        print("FAIL: no OutOfRangeError for", o)
        failures += 1
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: ordinal -> date -> ordinal.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    print(f"Testing ordinals {MIN_ORDINAL}..{MAX_ORDINAL} ...")
    total_fail = edge_test()
    total_fail += roundtrip_test(args.N, MIN_ORDINAL, MAX_ORDINAL, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
