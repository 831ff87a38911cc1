import argparse
import asyncio
import logging

import uvicorn

from src.emp_crud.config import settings
from src.emp_crud.utils.database import init_db

logger = logging.getLogger(__name__)

def main():
    parser = argparse.ArgumentParser(description="emp-crud API server")
    parser.add_argument('--init-db', action='store_true', help='create tables and exit')
    parser.add_argument('--host', default=settings.APP_HOST)
    parser.add_argument('--port', type=int, default=settings.APP_PORT)
    parser.add_argument('--reload', action='store_true')
    args = parser.parse_args()
    if args.init_db:
        asyncio.run(init_db())
        return
    logger.info("Starting API on %s:%s", args.host, args.port)
    uvicorn.run("src.emp_crud.app:app", host=args.host, port=args.port, reload=args.reload)

if __name__ == '__main__':
    main()
