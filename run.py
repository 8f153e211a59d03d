import argparse
import logging

import uvicorn

from talkus.core.config import settings

logger = logging.getLogger("talkus")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Talkus API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: 8000)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on code changes (default: on when DEBUG is set)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes, ignored with --reload (default: 1)",
    )
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    use_reload = args.reload or settings.DEBUG

    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    logger.info(f"Starting {settings.PROJECT_NAME} in {settings.ENVIRONMENT} mode")
    logger.info(f"Serving on http://{args.host}:{args.port} (reload: {'on' if use_reload else 'off'})")
    if settings.DEBUG:
        logger.info(f"Swagger UI: http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "talkus.main:app",
        host=args.host,
        port=args.port,
        reload=use_reload,
        workers=None if use_reload else args.workers,
    )

if __name__ == "__main__":
    main()
