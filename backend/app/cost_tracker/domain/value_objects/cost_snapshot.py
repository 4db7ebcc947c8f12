"""Cost snapshot value objects: the per-cycle view of spend per service."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Self

ServiceNameNormalizer = Callable[[str], str]


def _identity(name: str) -> str:
    return name


@dataclass(frozen=True)
class ServiceCost:
    """Immutable observed spend for a single service.

    Attributes:
        service: Service identifier as reported by the cost producer.
        cost: Spend for the evaluation window. Credits may make this negative.
    """

    service: str
    cost: Decimal

    def __post_init__(self) -> None:
        """Validate the entry after initialization."""
        if not isinstance(self.service, str) or not self.service.strip():
            raise ValueError("Service name must be a non-empty string")
        if not isinstance(self.cost, Decimal) or not self.cost.is_finite():
            raise ValueError(f"Cost for '{self.service}' must be a finite decimal")


@dataclass(frozen=True)
class CostSnapshot:
    """Read-only, point-in-time collection of service costs.

    The snapshot makes no freshness claims; it is whatever the ingestion
    side produced for the current window.
    """

    entries: tuple[ServiceCost, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> Self:
        return cls(())

    @classmethod
    def from_payload(cls, items: Optional[Iterable[Any]]) -> Self:
        """Build a snapshot from raw ``{"service": ..., "cost": ...}`` items.

        ``None`` and empty input produce an empty snapshot.

        Args:
            items: Mappings with ``service`` and ``cost`` keys, or ServiceCost.

        Returns:
            A new CostSnapshot preserving input order.

        Raises:
            ValueError: If any entry is malformed.
        """
        if items is None:
            return cls.empty()

        entries: list[ServiceCost] = []
        for position, item in enumerate(items):
            if isinstance(item, ServiceCost):
                entries.append(item)
                continue
            if not isinstance(item, Mapping):
                raise ValueError(f"Snapshot entry {position} is not an object")
            if "service" not in item or "cost" not in item:
                raise ValueError(
                    f"Snapshot entry {position} needs 'service' and 'cost' keys"
                )
            entries.append(
                ServiceCost(service=item["service"], cost=_to_decimal(item["cost"]))
            )
        return cls(tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def total(self) -> Decimal:
        """Total spend across every service in the snapshot."""
        return sum((e.cost for e in self.entries), Decimal("0"))

    def by_service(
        self, normalize: ServiceNameNormalizer = _identity
    ) -> dict[str, Decimal]:
        """Index costs by (normalized) service name.

        Entries that normalize to the same key are summed.

        Args:
            normalize: Function applied to each service name.

        Returns:
            Mapping of service key to cost.
        """
        index: dict[str, Decimal] = {}
        for entry in self.entries:
            key = normalize(entry.service)
            index[key] = index.get(key, Decimal("0")) + entry.cost
        return index


def _to_decimal(value: Any) -> Decimal:
    """Convert a JSON-ish number to Decimal without float artefacts."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid cost value: {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid cost value: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Invalid cost value: {value!r}")
    return result
