#!/usr/bin/env python3
"""Print per-bucket ledger totals for a saved order array.

This script is runnable directly (python scripts/ledger_report.py orders.json) and also import-safe.
If you see `ModuleNotFoundError: No module named 'fishorders'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import argparse
import json

from fishorders.config.settings import settings
from fishorders.core.query import DateRange
from fishorders.crud.order import OrderBook
from fishorders.errors import ContractViolation
from fishorders.models.order import Bucket
from fishorders.utils.logging import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description='Rebuild the ledger from a saved order array and print totals.')
    parser.add_argument('path', help='JSON file holding the saved order array')
    parser.add_argument('--query', default='', help='Only count orders matching this text in the view summary')
    parser.add_argument('--range', dest='date_range', default='all',
                        choices=[r.value for r in DateRange], help='Date range for the view summary')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    setup_logging('DEBUG' if args.debug else settings.LOG_LEVEL)

    with open(args.path, encoding='utf-8') as fh:
        records = json.load(fh)

    book = OrderBook()
    try:
        book.load(records)
    except ContractViolation as exc:
        print('Error while loading orders:', exc)
        return 1

    print(f"{'bucket':<10}{'orders':>8}{'free':>6}{'weight (kg)':>14}{'revenue':>16}")
    for bucket in Bucket:
        totals = book.ledger.totals(bucket)
        print(f"{bucket.value:<10}{totals.order_count:>8}{totals.free_count:>6}"
              f"{totals.total_weight:>14}{totals.total_revenue:>16}")

    archived = book.ledger.totals(Bucket.archived)
    print()
    for status, revenue in archived.revenue_by_payment.items():
        if revenue:
            print(f"archived {status.value}: {revenue}")

    filtered = book.buckets(args.query, DateRange(args.date_range))
    print()
    print('view:', ', '.join(f"{b.value}={len(filtered.bucket(b))}" for b in Bucket))
    return 0


if __name__ == '__main__':
    sys.exit(main())
