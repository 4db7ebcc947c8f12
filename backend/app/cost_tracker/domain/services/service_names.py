"""Service-name matching rules.

Cost producers report the same AWS service under several names
("Amazon Elastic Compute Cloud - Compute", "EC2 - Other", ...). Two
matching modes are supported:

- exact: names are compared as-is
- consolidated: variants are folded onto one canonical name first
"""

from typing import Literal

from app.cost_tracker.domain.value_objects.cost_snapshot import ServiceNameNormalizer

ServiceNameMatching = Literal["exact", "consolidated"]

# Checked in order; first rule with a matching fragment wins.
_CONSOLIDATION_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Amazon S3", ("Simple Storage Service", "Amazon S3")),
    (
        "Amazon EC2",
        (
            "Elastic Compute Cloud",
            "Amazon EC2",
            "EC2 Container Registry",
            "EC2 - Other",
        ),
    ),
    ("Amazon RDS", ("Relational Database Service", "Amazon RDS")),
    ("Amazon VPC", ("Virtual Private Cloud", "Amazon VPC")),
    ("Amazon Route 53", ("Route 53",)),
    ("AWS Lambda", ("Lambda",)),
    ("Amazon CloudFront", ("CloudFront",)),
    ("AWS Glue", ("Glue",)),
)


def exact_service_name(name: str) -> str:
    """Return the name unchanged."""
    return name


def normalize_service_name(name: str) -> str:
    """Fold an AWS service-name variant onto its canonical name.

    Matching is case-insensitive on surrounding whitespace-trimmed input.
    Names with no rule are returned trimmed but otherwise unchanged.

    Examples:
        >>> normalize_service_name("Amazon Elastic Compute Cloud - Compute")
        'Amazon EC2'
        >>> normalize_service_name("Tax")
        'Tax'
    """
    stripped = name.strip()
    lowered = stripped.lower()
    for canonical, fragments in _CONSOLIDATION_RULES:
        if any(fragment.lower() in lowered for fragment in fragments):
            return canonical
    return stripped


def get_service_name_normalizer(mode: ServiceNameMatching) -> ServiceNameNormalizer:
    """Resolve a matching mode from configuration to a normalizer."""
    if mode == "exact":
        return exact_service_name
    if mode == "consolidated":
        return normalize_service_name
    raise ValueError(f"Unknown service name matching mode: {mode}")
