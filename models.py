from dataclasses import dataclass, field

NOT_SPECIFIED = "Not specified"
NOT_AVAILABLE = "N/A"

SENTINELS = {NOT_SPECIFIED, NOT_AVAILABLE}


@dataclass
class JobRecord:
    id: str  # absolute posting URL, same as link
    title: str
    link: str
    company: str = NOT_SPECIFIED
    location: str = NOT_AVAILABLE
    job_type: str = NOT_SPECIFIED
    date_posted: str = NOT_AVAILABLE

    def has(self, name: str) -> bool:
        """True when a descriptive field holds real data rather than its placeholder."""
        value = getattr(self, name, "")
        return bool(value) and value not in SENTINELS


@dataclass
class Extraction:
    jobs: list[JobRecord] = field(default_factory=list)
    containers: int = 0  # listing containers matched by the winning selector


@dataclass
class CollectResult:
    jobs: list[JobRecord] = field(default_factory=list)
    containers: int = 0
    error: str | None = None

    @property
    def fetch_failed(self) -> bool:
        return self.error is not None


@dataclass
class NotifyResult:
    sent: bool
    error: str | None = None
