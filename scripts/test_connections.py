#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify MongoDB and the ranking service are reachable.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.mongodb import create_mongo_client, test_mongo_connection
from app.services.ai_client import RankingClient


def main():
    settings = get_settings()
    print("=" * 50)
    print("INTERNSHIP PORTAL - CONNECTION TEST")
    print("=" * 50)

    # Test MongoDB
    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    client = create_mongo_client(settings)
    if test_mongo_connection(client):
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")
    client.close()

    # Test ranking service (only if API key is set)
    print("\n[2] Testing ranking service...")
    if settings.ai_enabled:
        print(f"    Base URL: {settings.ai_base_url}")
        print(f"    Model: {settings.ai_model} (timeout {settings.ai_timeout_seconds}s)")
        if RankingClient(settings).test_connection():
            print("    ✅ Ranking service: CONNECTED")
        else:
            print("    ❌ Ranking service: FAILED (recommendations will use heuristic matching)")
    else:
        print("    ⚠️  Ranking service: API key not configured (heuristic matching only)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
