"""Block spec parsing: "remote[:block]" identifiers used by `borrowr import`."""

from dataclasses import dataclass

from borrowr.core.errors import InvalidBlockSpecError


@dataclass(frozen=True)
class BlockSpec:
    """Reference to a remote, optionally narrowed to a single block.

    block_id is None when the string had no ":" (meaning every block of the
    remote is a candidate). An empty string is kept as-is.
    """

    remote_id: str
    block_id: str | None = None

    @property
    def qualified_id(self) -> str:
        if self.block_id is None:
            return self.remote_id
        return f"{self.remote_id}:{self.block_id}"


def parse_block_spec(spec: str) -> BlockSpec:
    """Parse a "remote[:block]" string.

    Only the first ":" separates the parts; anything after it is the block id.

    Raises:
        InvalidBlockSpecError: If the remote part is empty
    """
    remote_id, sep, block_id = spec.partition(":")
    if not remote_id:
        raise InvalidBlockSpecError(spec, "Missing remote id")

    if not sep:
        return BlockSpec(remote_id=remote_id)
    return BlockSpec(remote_id=remote_id, block_id=block_id)
