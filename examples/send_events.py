"""Minimal example sending events to a local Graylog GELF UDP input."""

from __future__ import annotations

import logging
import time

import gelfsend


def main() -> None:
    gelfsend.configure(
        {
            "endpoint": {"address": "127.0.0.1", "port": 12201},
            "source": {"hostname": "gelfsend-demo"},
        }
    )

    gelfsend.send("disk full", "volume /data at 98%", level="error", extra={"volume": "/data"})

    logger = logging.getLogger("examples.orders")
    logger.setLevel(logging.INFO)
    logger.addHandler(gelfsend.get_handler())
    for order_id in range(1, 4):
        logger.info("processed order", extra={"order_id": order_id, "total": order_id * 19.99})
        time.sleep(0.1)

    gelfsend.shutdown()


if __name__ == "__main__":
    main()
