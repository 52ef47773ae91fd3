"""
Readers for batches exported from a chain archive.

An export is a JSON array of blocks matching the `gmindexer.types.chain` dataclasses, e.g.

```
[
    {
        "header": {"height": 1000, "timestamp": 1668000000000, "spec_version": 3},
        "items": [
            {
                "name": "Tokens.Transfer",
                "event": {
                    "id": "0000001000-000002-a1b2c",
                    "args": {
                        "currencyId": {"__kind": "GM"},
                        "from": "0x...",
                        "to": "0x...",
                        "amount": 500
                    },
                    "extrinsic": {"hash": "0x...", "fee": 1250000000}
                }
            }
        ]
    }
]
```
"""

import pathlib

from pydantic import TypeAdapter

from gmindexer.types.chain import Block

_blocks_adapter = TypeAdapter(list[Block])


def load_blocks(data: str | bytes) -> list[Block]:
    return _blocks_adapter.validate_json(data)


def load_blocks_from_file(path: pathlib.Path) -> list[Block]:
    return load_blocks(path.read_bytes())
