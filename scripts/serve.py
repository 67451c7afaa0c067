from __future__ import annotations

import argparse
from pathlib import Path
import socket
import sys

ROOT = Path(__file__).resolve().parents[1]
BACKEND_ROOT = ROOT / 'backend'
sys.path.insert(0, str(BACKEND_ROOT))

import uvicorn

from app.core.config import get_settings
from app.db.init_db import init_db, seed_categories
from app.db.session import SessionLocal


def can_connect(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(0.5)
        return sock.connect_ex((host, port)) == 0


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description='Serve the ratings quality API.')
    parser.add_argument('--host', default=settings.server_host)
    parser.add_argument('--port', type=int, default=settings.server_port)
    parser.add_argument(
        '--init-db',
        action='store_true',
        help='Create tables and default rating categories before serving.',
    )
    parser.add_argument('--reload', action='store_true')
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    probe_host = '127.0.0.1' if args.host == '0.0.0.0' else args.host
    if can_connect(probe_host, args.port):
        print(f'Port {args.port} is already in use.')
        return 2

    if args.init_db:
        init_db()
        with SessionLocal() as session:
            seed_categories(session)

    print(f'Starting server on {args.host}:{args.port} (db={get_settings().resolved_database_url})')
    uvicorn.run(
        'app.main:app',
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(BACKEND_ROOT),
    )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
