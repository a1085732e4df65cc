#!/usr/bin/env python3
import argparse
import sys

import pandas as pd
import requests

from . import config
from .client import SimilarityClient

BINS   = [0, 20, 40, 60, 80, 100]
LABELS = ["0-20", "20-40", "40-60", "60-80", "80-100"]


def to_frame(submissions):
    rows = []
    for s in submissions:
        result = s.get("result") or {}
        rows.append({
            "timestamp": s.get("timestamp"),
            "score": float(result.get("similarityScore", 0.0)),
            "shared": int(result.get("sharedWordCount", 0)),
        })
    return pd.DataFrame(rows, columns=["timestamp", "score", "shared"])


def summarize(df):
    if df.empty:
        return {"total": 0, "avg_score": None, "min_score": None, "max_score": None}
    return {
        "total": int(len(df)),
        "avg_score": round(float(df["score"].mean()), 2),
        "min_score": float(df["score"].min()),
        "max_score": float(df["score"].max()),
    }


def distribution(df):
    buckets = pd.cut(df["score"], bins=BINS, labels=LABELS, include_lowest=True, right=False)
    # 100 queda fuera de [80, 100)
    buckets = buckets.fillna(LABELS[-1])
    return buckets.value_counts().reindex(LABELS, fill_value=0)


def print_report(df, out=None):
    out = out or sys.stdout
    stats = summarize(df)
    print("SIMILARITY METRICS:", file=out)
    print(f"Total submissions: {stats['total']}", file=out)
    if not stats["total"]:
        return
    print(f"Average score: {stats['avg_score']}", file=out)
    print(f"Minimum score: {stats['min_score']}", file=out)
    print(f"Maximum score: {stats['max_score']}", file=out)

    print("\nSCORE DISTRIBUTION:", file=out)
    for label, count in distribution(df).items():
        pct = (count / stats["total"]) * 100
        print(f"{label}: {count} submissions ({pct:.1f}%)", file=out)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Summarize recent similarity submissions")
    parser.add_argument("--url", default=config.SIMILARITY_URL, help="service base URL")
    args = parser.parse_args(argv)

    try:
        submissions = SimilarityClient(args.url).submissions()
    except requests.RequestException as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"make sure the service is running at: {args.url}", file=sys.stderr)
        return 1

    print_report(to_frame(submissions))
    return 0


if __name__ == "__main__":
    sys.exit(main())
