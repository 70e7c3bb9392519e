# context_wizard/records/types.py
"""Data types for the context analysis records."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from context_wizard.errors import ValidationError


OTHER_SECTOR = "lainnya"

# Selectable sectors (value -> label); OTHER_SECTOR requires free text
SECTORS = {
    "manufaktur": "Manufaktur",
    "jasa": "Jasa",
    "teknologi": "Teknologi",
    "kesehatan": "Kesehatan",
    "pendidikan": "Pendidikan",
    "logistik": "Logistik",
    OTHER_SECTOR: "Lainnya...",
}

PRIORITY_SCALES = (1, 2, 3, 4, 5)
DEFAULT_PRIORITY = 3


class ImpactLevel(Enum):
    """Ordinal impact of a factor or strategy."""

    LOW = "Rendah"
    MEDIUM = "Sedang"
    HIGH = "Tinggi"

    @classmethod
    def from_string(cls, value: str) -> "ImpactLevel":
        """Convert a display value or member name to ImpactLevel."""
        value = value.strip()
        for member in cls:
            if member.value.lower() == value.lower() or member.name.lower() == value.lower():
                return member
        raise ValueError(f"Unknown impact level: {value}")


class Framework(Enum):
    """Analysis framework owning a category."""

    SWOT = "swot"
    PESTLE = "pestle"


class Category(Enum):
    """The ten SWOT and PESTLE categories."""

    STRENGTHS = "strengths"
    WEAKNESSES = "weaknesses"
    OPPORTUNITIES = "opportunities"
    THREATS = "threats"
    POLITICAL = "political"
    ECONOMIC = "economic"
    SOCIAL = "social"
    TECHNOLOGICAL = "technological"
    LEGAL = "legal"
    ENVIRONMENTAL = "environmental"

    @property
    def framework(self) -> Framework:
        return _FRAMEWORKS[self]

    @property
    def is_external(self) -> bool:
        """Opportunities, threats and every PESTLE category come from outside the organization."""
        return self in EXTERNAL_CATEGORIES

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def from_string(cls, value: str) -> "Category":
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown category: {value}")


_FRAMEWORKS = {
    Category.STRENGTHS: Framework.SWOT,
    Category.WEAKNESSES: Framework.SWOT,
    Category.OPPORTUNITIES: Framework.SWOT,
    Category.THREATS: Framework.SWOT,
    Category.POLITICAL: Framework.PESTLE,
    Category.ECONOMIC: Framework.PESTLE,
    Category.SOCIAL: Framework.PESTLE,
    Category.TECHNOLOGICAL: Framework.PESTLE,
    Category.LEGAL: Framework.PESTLE,
    Category.ENVIRONMENTAL: Framework.PESTLE,
}

EXTERNAL_CATEGORIES = frozenset({
    Category.OPPORTUNITIES,
    Category.THREATS,
    Category.POLITICAL,
    Category.ECONOMIC,
    Category.SOCIAL,
    Category.TECHNOLOGICAL,
    Category.LEGAL,
    Category.ENVIRONMENTAL,
})

SWOT_CATEGORIES = tuple(c for c in Category if c.framework is Framework.SWOT)
PESTLE_CATEGORIES = tuple(c for c in Category if c.framework is Framework.PESTLE)

# Card titles on the validation screen
CATEGORY_LABELS = {
    Category.STRENGTHS: "Kekuatan (Strengths)",
    Category.WEAKNESSES: "Kelemahan (Weaknesses)",
    Category.OPPORTUNITIES: "Peluang (Opportunities)",
    Category.THREATS: "Ancaman (Threats)",
    Category.POLITICAL: "Politik (Political)",
    Category.ECONOMIC: "Ekonomi (Economic)",
    Category.SOCIAL: "Sosial (Social)",
    Category.TECHNOLOGICAL: "Teknologi (Technological)",
    Category.LEGAL: "Hukum (Legal)",
    Category.ENVIRONMENTAL: "Lingkungan (Environmental)",
}


class TowsCategory(Enum):
    """TOWS strategy quadrants, in report order."""

    SO = "SO"
    ST = "ST"
    WO = "WO"
    WT = "WT"


def validate_priority(value: int) -> int:
    """Check a priority is on the 1-5 scale."""
    value = int(value)
    if value not in PRIORITY_SCALES:
        raise ValueError(f"Priority must be between 1 and 5, got {value}")
    return value


@dataclass
class Profile:
    """Identity of the organization being analysed."""

    user_name: str = ""
    job_title: str = ""
    analysis_date: str = field(default_factory=lambda: date.today().isoformat())
    company_name: str = ""
    sector: str = "manufaktur"
    unit_name: str = ""
    custom_sector: str = ""

    @property
    def resolved_sector(self) -> str:
        """Sector text used in prompts and the report."""
        if self.sector == OTHER_SECTOR:
            return self.custom_sector
        return self.sector

    def missing_fields(self) -> list[str]:
        """Names of required fields that are still blank."""
        missing = []
        for name in ("user_name", "job_title", "analysis_date", "company_name"):
            if not getattr(self, name).strip():
                missing.append(name)
        if not self.resolved_sector.strip():
            missing.append("custom_sector" if self.sector == OTHER_SECTOR else "sector")
        if not self.unit_name.strip():
            missing.append("unit_name")
        return missing

    def validate(self) -> None:
        """Raise ValidationError if the profile cannot leave the profile screen."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError(
                f"Profile incomplete: {', '.join(missing)}", missing=missing
            )

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


@dataclass(frozen=True)
class AnalysisFactor:
    """One SWOT or PESTLE bullet."""

    id: int
    text: str
    impact: ImpactLevel = ImpactLevel.MEDIUM
    priority: int = DEFAULT_PRIORITY
    is_external: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "impact": self.impact.value,
            "priority": self.priority,
            "is_external": self.is_external,
        }


@dataclass(frozen=True)
class TowsStrategy:
    """One recommended action from the TOWS matrix."""

    id: int
    category: TowsCategory
    text: str
    impact: ImpactLevel = ImpactLevel.MEDIUM
    priority: int = DEFAULT_PRIORITY

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category.value,
            "text": self.text,
            "impact": self.impact.value,
            "priority": self.priority,
        }


@dataclass
class SwotData:
    strengths: list[AnalysisFactor] = field(default_factory=list)
    weaknesses: list[AnalysisFactor] = field(default_factory=list)
    opportunities: list[AnalysisFactor] = field(default_factory=list)
    threats: list[AnalysisFactor] = field(default_factory=list)


@dataclass
class PestleData:
    political: list[AnalysisFactor] = field(default_factory=list)
    economic: list[AnalysisFactor] = field(default_factory=list)
    social: list[AnalysisFactor] = field(default_factory=list)
    technological: list[AnalysisFactor] = field(default_factory=list)
    legal: list[AnalysisFactor] = field(default_factory=list)
    environmental: list[AnalysisFactor] = field(default_factory=list)


def container_for(category: Category, swot: SwotData, pestle: PestleData):
    """Return the SwotData or PestleData that owns a category."""
    if category.framework is Framework.SWOT:
        return swot
    if category.framework is Framework.PESTLE:
        return pestle
    raise ValueError(f"No container for category: {category}")  # pragma: no cover


def parse_field_value(field_name: str, value):
    """Coerce an edited value for the text/impact/priority fields."""
    if field_name == "text":
        return str(value)
    if field_name == "impact":
        return value if isinstance(value, ImpactLevel) else ImpactLevel.from_string(str(value))
    if field_name == "priority":
        return validate_priority(value)
    raise ValueError(f"Unknown field: {field_name}")
