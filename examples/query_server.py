#!/usr/bin/env python3
"""
Query Server Example - basic pyquake3 usage

Usage:
    python query_server.py 192.0.2.10
    python query_server.py 192.0.2.10 --port 27961
"""

import sys
import argparse
from pyquake3 import QueryChannel, Quake3Error


def main():
    parser = argparse.ArgumentParser(description="Query a Quake III server")
    parser.add_argument("address", help="Server IP address")
    parser.add_argument("--port", type=int, default=27960, help="Server port")
    parser.add_argument("--timeout", type=float, default=3.0, help="Read timeout in seconds")

    args = parser.parse_args()

    # Address first, then port, then build
    channel = (QueryChannel.builder()
               .with_address(args.address)
               .with_port(args.port)
               .with_timeout(args.timeout)
               .build())

    with channel:
        status = channel.query_status()

    print('Host Name:', status.hostname)
    print('Current Map:', status.map_name)
    print('Online Players: {0}/{1}'.format(status.player_count, status.max_clients))
    for player in status.players:
        print(' ', player)


if __name__ == "__main__":
    try:
        main()
    except Quake3Error as e:
        print(f"Error: {e}")
        sys.exit(1)
