#!/usr/bin/env python
"""
ZeroMQ Client Example

Discovers the example server's methods and calls a few of them.
"""

import json
import logging

from seam_rpc.adapters.zeromq.client import ZeroMQClient
from seam_rpc.config import ClientConfig

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Run ZeroMQ client example"""
    client = ZeroMQClient.from_config(ClientConfig.from_env())

    try:
        definition = client.describe()
        logger.info(f"Server definition: {json.dumps(definition, indent=2)}")

        logger.info(f"math.add [2, 3] -> {client.call('math.add', [2, 3])['result']}")
        logger.info(f"math.add {{a: 2, b: 3}} -> {client.call('math.add', {'a': 2, 'b': 3})['result']}")
        logger.info(f"math.divide by zero -> {client.call('math.divide', [1, 0])['error']}")
        logger.info(f"counter.increment -> {client.call('counter.increment', {'step': 5})['result']}")
        logger.info(f"echo -> {client.call('echo', ['hello', 0.2])['result']}")
        logger.info(f"version -> {client.call('version')['result']}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
