"""JSON-RPC chain client.

Implements ChainAccessProtocol against an Ethereum-style node using
eth_getBlockByHash. Quantities arrive as 0x-prefixed hex strings.

A block the node does not know comes back as a null result and is
reported as None. An error object in the response is raised as
ChainAccessError; transport failures propagate as httpx errors.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Optional

import httpx

from consensus_signal.domain.errors.chain import ChainAccessError
from consensus_signal.domain.ports.block_source import BlockInfo
from consensus_signal.infrastructure.observability.logging import get_logger_for_service


class ChainRpcClient:
    """Async JSON-RPC client for block lookups.

    Example:
        async with ChainRpcClient("http://localhost:8545") as chain:
            info = await chain.get_block_info("0xabc...")
    """

    DEFAULT_RPC_URL = "http://localhost:8545"

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize client.

        Args:
            rpc_url: Node JSON-RPC endpoint. Defaults to localhost.
            timeout: Request timeout in seconds.
        """
        self.rpc_url = rpc_url or self.DEFAULT_RPC_URL
        self._client = httpx.AsyncClient(timeout=timeout)
        self._ids = count(1)
        self._log = get_logger_for_service("chain_rpc_client", component="adapter")

    async def __aenter__(self) -> "ChainRpcClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call.

        Args:
            method: RPC method name.
            params: Positional RPC params.

        Returns:
            The 'result' member of the response.

        Raises:
            ChainAccessError: If the response carries an 'error' member.
            httpx.HTTPStatusError: On a non-2xx response.
        """
        request = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        response = await self._client.post(self.rpc_url, json=request)
        response.raise_for_status()
        data = response.json()

        error = data.get("error")
        if error:
            self._log.warning(
                "chain_rpc_error",
                method=method,
                code=error.get("code"),
                message=error.get("message"),
            )
            raise ChainAccessError(error.get("message", "Chain access failed"), error.get("code"))

        return data.get("result")

    async def get_block_info(self, block_hash: str) -> BlockInfo | None:
        """Fetch number and timestamp of a block by hash.

        Args:
            block_hash: Hex-encoded block hash.

        Returns:
            BlockInfo, or None if the node does not know the block.
        """
        block = await self.call("eth_getBlockByHash", [block_hash, False])
        if not block:
            return None

        return BlockInfo(
            block_number=int(block["number"], 16),
            timestamp=int(block["timestamp"], 16),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
