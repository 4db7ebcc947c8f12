"""Unit tests for the CostSnapshot value object."""

from decimal import Decimal

import pytest

from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot, ServiceCost


class TestCostSnapshotFromPayload:
    """Tests for CostSnapshot.from_payload."""

    def test_none_gives_empty_snapshot(self) -> None:
        """Test that a missing payload is an empty snapshot."""
        costs = CostSnapshot.from_payload(None)

        assert len(costs) == 0
        assert not costs
        assert costs.total == Decimal("0")

    def test_parses_numbers_without_float_artefacts(self) -> None:
        """Test that float costs are converted through their string form."""
        costs = CostSnapshot.from_payload([{"service": "S3", "cost": 0.1}])

        assert costs.entries == (ServiceCost(service="S3", cost=Decimal("0.1")),)

    def test_accepts_numeric_strings(self) -> None:
        """Test that string amounts from JSON producers are accepted."""
        costs = CostSnapshot.from_payload([{"service": "S3", "cost": "12.50"}])

        assert costs.total == Decimal("12.50")

    @pytest.mark.parametrize(
        "payload",
        [
            [{"service": "S3"}],
            [{"cost": 1}],
            [{"service": "", "cost": 1}],
            [{"service": "S3", "cost": None}],
            [{"service": "S3", "cost": True}],
            [{"service": "S3", "cost": "abc"}],
            [{"service": "S3", "cost": "NaN"}],
            [["S3", 1]],
        ],
    )
    def test_rejects_malformed_entries(self, payload: list) -> None:
        """Test that malformed entries raise ValueError."""
        with pytest.raises(ValueError):
            CostSnapshot.from_payload(payload)


class TestCostSnapshotIndexing:
    """Tests for CostSnapshot.by_service and total."""

    def test_by_service_sums_duplicates(self) -> None:
        """Test that duplicate service keys are summed."""
        costs = CostSnapshot.from_payload(
            [
                {"service": "EC2", "cost": 1},
                {"service": "S3", "cost": 2},
                {"service": "EC2", "cost": 3},
            ]
        )

        assert costs.by_service() == {"EC2": Decimal("4"), "S3": Decimal("2")}

    def test_by_service_applies_normalizer(self) -> None:
        """Test that the normalizer decides which entries share a key."""
        costs = CostSnapshot.from_payload(
            [{"service": "ec2", "cost": 1}, {"service": "EC2", "cost": 2}]
        )

        assert costs.by_service(str.upper) == {"EC2": Decimal("3")}

    def test_total_includes_credits(self) -> None:
        """Test that negative costs are allowed and reduce the total."""
        costs = CostSnapshot.from_payload(
            [{"service": "EC2", "cost": 10}, {"service": "Credit", "cost": -4}]
        )

        assert costs.total == Decimal("6")
