"""Feature flags controlling optional thank-you behaviour."""

from thanks.domain.model.common import DomainModel


class FeatureFlags(DomainModel):
    """Runtime switches stored alongside thank-you data.

    tags_enabled: thank yous may carry tags
    tags_mandatory: every new thank you must carry at least one tag
    """

    tags_enabled: bool = False
    tags_mandatory: bool = False
