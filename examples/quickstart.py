#!/usr/bin/env python3
"""Kuzzle SDK quickstart.

Demonstrates the basic workflow against a running Kuzzle server:

1. Build an HTTP transport from connection options.
2. Wrap it in a Kuzzle client.
3. Read the server time, create an index and list indexes through the
   controllers.
4. Send a raw request and inspect the response envelope.

Run (with Kuzzle listening on localhost:7512):
    python examples/quickstart.py
"""
from __future__ import annotations

import logging

from kuzzle_sdk import Http, Kuzzle, KuzzleError, KuzzleOptions, Request


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # -- [1] Transport -------------------------------------------------------
    options = KuzzleOptions(host="localhost", port=7512, timeout=5.0)
    transport = Http(options)
    print(f"[1] HTTP transport targeting {transport.base_url}")

    with Kuzzle(transport) as kuzzle:
        # -- [2]-[4] Controllers ---------------------------------------------
        print(f"[2] Server time: {kuzzle.server.now()}")

        try:
            kuzzle.index.create("quickstart")
            print("[3] Index 'quickstart' created")
        except KuzzleError as exc:
            print(f"[3] Index not created: {exc}")

        print(f"[4] Indexes: {kuzzle.index.list()}")

        # -- [5] Raw request -------------------------------------------------
        response = kuzzle.query(
            Request(controller="index", action="exists").set_index("quickstart")
        )
        print(f"[5] index/exists -> status={response.status} result={response.result}")


if __name__ == "__main__":
    main()
