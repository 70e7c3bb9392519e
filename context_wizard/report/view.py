# context_wizard/report/view.py
"""Read-only compiled view of the final report."""

from dataclasses import dataclass, field
from datetime import date

from context_wizard.records.store import RecordStore
from context_wizard.records.types import (
    Category,
    PESTLE_CATEGORIES,
    Profile,
    SWOT_CATEGORIES,
    TowsStrategy,
)

MONTHS_ID = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)

# Short labels used in the report tables
ROW_LABELS = {
    Category.STRENGTHS: "Kekuatan",
    Category.WEAKNESSES: "Kelemahan",
    Category.OPPORTUNITIES: "Peluang",
    Category.THREATS: "Ancaman",
    Category.POLITICAL: "Politik",
    Category.ECONOMIC: "Ekonomi",
    Category.SOCIAL: "Sosial",
    Category.TECHNOLOGICAL: "Teknologi",
    Category.LEGAL: "Hukum/Legal",
    Category.ENVIRONMENTAL: "Lingkungan",
}

ISO_SUMMARY = (
    "Analisis ini mengidentifikasi isu-isu internal dan eksternal yang relevan dengan "
    "tujuan dan arah strategis perusahaan, sesuai dengan Klausul 4.1 ISO 9001:2015. "
    "Kekuatan (Strengths) dan Kelemahan (Weaknesses) merupakan faktor internal yang dapat "
    "dikendalikan, sementara Peluang (Opportunities) dan Ancaman (Threats) adalah faktor "
    "eksternal yang perlu diantisipasi. Analisis PESTLE memperdalam pemahaman terhadap "
    "lingkungan eksternal. Hasil analisis ini menjadi dasar untuk menentukan risiko dan "
    "peluang yang perlu ditangani (Klausul 6.1) guna meningkatkan kepuasan pelanggan dan "
    "mencapai peningkatan berkelanjutan."
)


@dataclass(frozen=True)
class FactorRow:
    category: str
    text: str
    impact: str
    priority: int


@dataclass(frozen=True)
class StrategyRow:
    priority: int
    category: str
    text: str
    impact: str


@dataclass
class ReportView:
    """Everything the final report shows, in display order."""

    company_name: str
    identity: list[tuple[str, str]] = field(default_factory=list)
    summary: str = ISO_SUMMARY
    swot_rows: list[FactorRow] = field(default_factory=list)
    pestle_rows: list[FactorRow] = field(default_factory=list)
    tows_rows: list[StrategyRow] = field(default_factory=list)


def format_analysis_date(value: str) -> str:
    """Format an ISO date as e.g. '17 Oktober 2026'; unparseable input is returned as-is."""
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed.day} {MONTHS_ID[parsed.month - 1]} {parsed.year}"


def sort_tows(strategies: list[TowsStrategy]) -> list[TowsStrategy]:
    """Highest priority first; equal priorities keep generation order."""
    return sorted(strategies, key=lambda s: s.priority, reverse=True)


def _factor_rows(store: RecordStore, categories) -> list[FactorRow]:
    return [
        FactorRow(ROW_LABELS[category], f.text, f.impact.value, f.priority)
        for category in categories
        for f in store.factors(category)
    ]


def build_report_view(profile: Profile, store: RecordStore) -> ReportView:
    """Compile the final report from the profile and the record store."""
    identity = [
        ("Nama Perusahaan", profile.company_name),
        ("Sektor", profile.resolved_sector),
        ("Unit/Bagian", profile.unit_name),
        ("Tanggal Analisa", format_analysis_date(profile.analysis_date)),
        ("Analis", profile.user_name),
        ("Jabatan", profile.job_title),
    ]
    tows_rows = [
        StrategyRow(s.priority, s.category.value, s.text, s.impact.value)
        for s in sort_tows(store.tows)
    ]
    return ReportView(
        company_name=profile.company_name,
        identity=identity,
        swot_rows=_factor_rows(store, SWOT_CATEGORIES),
        pestle_rows=_factor_rows(store, PESTLE_CATEGORIES),
        tows_rows=tows_rows,
    )
