from __future__ import annotations

import argparse
from datetime import date, datetime, time, timedelta
from pathlib import Path
import random
import sys

ROOT = Path(__file__).resolve().parents[1]
BACKEND_ROOT = ROOT / 'backend'
sys.path.insert(0, str(BACKEND_ROOT))

from app.db.init_db import init_db, seed_categories
from app.db.session import SessionLocal
from app.models.rating import Rating
from app.utils.timezone import QUERY_TIMESTAMP_FORMAT


def main(start: date, days: int, per_day: int, seed: int) -> int:
    init_db()
    rng = random.Random(seed)
    with SessionLocal() as session:
        categories = seed_categories(session)
        ratings: list[Rating] = []
        for offset in range(days):
            day = start + timedelta(days=offset)
            for ticket_id in range(per_day):
                created_at = datetime.combine(day, time(hour=rng.randint(8, 18), minute=rng.randint(0, 59)))
                for category in categories:
                    ratings.append(
                        Rating(
                            rating=rng.randint(1, 5),
                            ticket_id=offset * per_day + ticket_id,
                            rating_category_id=category.id,
                            created_at=created_at.strftime(QUERY_TIMESTAMP_FORMAT),
                        )
                    )
        session.add_all(ratings)
        session.commit()
    print(f'Inserted {len(ratings)} ratings from {start.isoformat()} over {days} days')
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Seed demo ratings into the configured database.')
    parser.add_argument('--start', type=date.fromisoformat, default=date(2025, 1, 1))
    parser.add_argument('--days', type=int, default=60)
    parser.add_argument('--per-day', type=int, default=5)
    parser.add_argument('--seed', type=int, default=7)
    args = parser.parse_args()
    raise SystemExit(main(args.start, args.days, args.per_day, args.seed))
