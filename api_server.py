"""
Hospital Duty Roster API Server

Serves the roster REST API with uvicorn. Tables are created and default
data seeded on startup.

Usage:
    # Start server
    python3 api_server.py

    # Or with custom port
    python3 api_server.py --port 8000

    # Test with curl
    curl "http://localhost:3000/staffs/query-duty/2024-01-01"
    curl -X POST "http://localhost:3000/admin/arrange-duty" \
         -H "Content-Type: application/json" \
         -d '{"staff_id": 1, "date": "2024-01-01", "shift": "morning"}'
"""
import argparse
import logging

import uvicorn

from hospital_roster.config.settings import settings


def main():
    """Main function to run the server"""
    parser = argparse.ArgumentParser(description="Run Hospital Duty Roster API Server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    uvicorn.run(
        "hospital_roster.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
