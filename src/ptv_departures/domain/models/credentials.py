"""Credentials domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Developer id and private signing key issued by PTV.

    The private key never appears in repr output so it cannot leak into logs.
    """

    devid: str | int
    private_key: str = field(repr=False)
