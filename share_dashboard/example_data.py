"""
Example data generator for the Social Media Share Dashboard.

Writes a synthetic ``social_media.csv`` in the same layout as the real
monthly usage-share export: a quoted header row, a ``YYYY-MM`` date
column, and one percentage column per platform.  Platforms that did
not exist yet report the literal ``0``, and every month's shares sum
to 100.

The series starts at the anomalous 2009-03 month, like the real export.
"""

import os
import random
from typing import List

# (platform, first year with usage, relative weight)
_PLATFORMS = [
    ('Facebook', 2009, 60.0),
    ('Twitter', 2009, 12.0),
    ('Pinterest', 2012, 9.0),
    ('YouTube', 2009, 5.0),
    ('Instagram', 2013, 4.0),
    ('Tumblr', 2010, 3.0),
    ('reddit', 2009, 2.5),
    ('LinkedIn', 2009, 1.5),
    ('VKontakte', 2010, 1.0),
    ('StumbleUpon', 2009, 6.0),
    ('Other', 2009, 0.5),
]

EXAMPLE_FILENAME = "social_media.csv"


def _months(first_year: int, first_month: int, last_year: int, last_month: int) -> List[str]:
    months = []
    year, month = first_year, first_month
    while (year, month) <= (last_year, last_month):
        months.append(f"{year:04d}-{month:02d}")
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return months


def generate_example_csv_text(
    first_year: int = 2009,
    last_year: int = 2014,
    seed: int = 42,
) -> str:
    """Build the example CSV text, reproducible for a given *seed*."""
    rng = random.Random(seed)

    header = ",".join(['"Date"'] + [f'"{name}"' for name, _, _ in _PLATFORMS])
    lines = [header]

    months = _months(first_year, 3, last_year, 12)
    for idx, month in enumerate(months):
        year = int(month[:4])
        trend = idx / max(1, len(months) - 1)

        raw = []
        for name, since, weight in _PLATFORMS:
            if year < since:
                raw.append(0.0)
                continue
            # Newer platforms gain share over time, StumbleUpon fades out
            if name in ('Pinterest', 'Instagram'):
                weight *= 0.5 + 1.5 * trend
            elif name == 'StumbleUpon':
                weight *= 1.0 - 0.9 * trend
            raw.append(weight * rng.uniform(0.85, 1.15))

        total = sum(raw)
        cells = [month]
        for value in raw:
            if value == 0.0:
                cells.append("0")
            else:
                cells.append(f"{100.0 * value / total:.2f}")
        lines.append(",".join(cells))

    return "\n".join(lines) + "\n"


def generate_example_csv(output_dir: str) -> str:
    """Write the example CSV into *output_dir* and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, EXAMPLE_FILENAME)
    with open(path, 'w', encoding='utf-8', newline='') as fh:
        fh.write(generate_example_csv_text())
    return path
