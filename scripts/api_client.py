"""
API Client for poking at a running roster server

Usage:
    # Health check
    python3 scripts/api_client.py --health

    # List staff / duty for a date
    python3 scripts/api_client.py --staff
    python3 scripts/api_client.py --duty 2024-01-01

    # Book a shift
    python3 scripts/api_client.py --arrange 1 2024-01-01 morning

    # Try admin credentials (password is the stored hash)
    python3 scripts/api_client.py --login admin 0192023a7bbd73250516f069df18b500
"""
import argparse
import json
from typing import Optional

import requests

DEFAULT_URL = "http://localhost:3000"


def call(method: str, path: str, base_url: str = DEFAULT_URL, payload: Optional[dict] = None):
    """
    Send a request and print the JSON reply

    Returns:
        Decoded body, or None if the server could not be reached
    """
    url = f"{base_url}{path}"
    try:
        response = requests.request(method, url, json=payload, timeout=10)
    except requests.exceptions.ConnectionError:
        print("ERROR: Cannot connect to API server.")
        print("Make sure the server is running: python3 api_server.py")
        return None
    except requests.exceptions.Timeout:
        print("ERROR: Request timed out (>10s)")
        return None

    body = response.json()
    print(f"{method} {path} -> HTTP {response.status_code}")
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return body


def check_health(base_url: str = DEFAULT_URL) -> bool:
    """Check if the API server is healthy"""
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        response.raise_for_status()
        health = response.json()
    except requests.exceptions.RequestException:
        print("\n❌ Server is not running or not healthy")
        print("Start the server with: python3 api_server.py\n")
        return False

    print(f"\n{'='*80}")
    print("Server Health Check")
    print(f"{'='*80}")
    print(f"Status: {health['status']}")
    print(f"Database connected: {health['database_connected']}")
    print(f"{'='*80}\n")

    return health['status'] == 'healthy'


def main():
    parser = argparse.ArgumentParser(description="Roster API client")
    parser.add_argument("--health", action="store_true", help="Check server health")
    parser.add_argument("--info", action="store_true", help="Show hospital info")
    parser.add_argument("--staff", action="store_true", help="List all staff")
    parser.add_argument("--duty", metavar="DATE", help="Show duty for a date (YYYY-MM-DD)")
    parser.add_argument("--arrange", nargs=3, metavar=("STAFF_ID", "DATE", "SHIFT"), help="Book a shift")
    parser.add_argument("--login", nargs=2, metavar=("USERNAME", "PASSWORD"), help="Try admin credentials")
    parser.add_argument(
        "--url",
        default=DEFAULT_URL,
        help=f"API server URL (default: {DEFAULT_URL})"
    )

    args = parser.parse_args()

    if args.health:
        check_health(args.url)
    elif args.info:
        call("GET", "/hospital/query-info", args.url)
    elif args.staff:
        call("GET", "/staffs/get-all-staffs", args.url)
    elif args.duty:
        call("GET", f"/staffs/query-duty/{args.duty}", args.url)
    elif args.arrange:
        staff_id, date, shift = args.arrange
        call("POST", "/admin/arrange-duty", args.url, {"staff_id": int(staff_id), "date": date, "shift": shift})
    elif args.login:
        username, password = args.login
        call("POST", "/admin/login", args.url, {"username": username, "password": password})
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
