"""Shared test helpers."""

import copy

import pytest


DRAFT_RESPONSE = {
    "swot": {
        "strengths": ["Tenaga kerja terampil", "Sertifikasi mutu internal"],
        "weaknesses": ["Dokumentasi proses belum lengkap"],
        "opportunities": ["Permintaan ekspor meningkat"],
        "threats": ["Persaingan harga dari impor", "Kenaikan harga bahan baku"],
    },
    "pestle": {
        "political": ["Kebijakan TKDN"],
        "economic": ["Fluktuasi kurs rupiah"],
        "social": ["Kesadaran konsumen akan mutu"],
        "technological": ["Otomasi lini produksi"],
        "legal": ["Regulasi SNI wajib"],
        "environmental": ["Pengelolaan limbah B3"],
    },
}

TOWS_RESPONSE = {
    "so_strategies": ["Perluas ekspor dengan tenaga terampil", "Promosikan sertifikasi mutu"],
    "st_strategies": ["Tonjolkan mutu dibanding produk impor"],
    "wo_strategies": ["Lengkapi dokumentasi untuk syarat ekspor"],
    "wt_strategies": ["Standarisasi proses untuk menekan biaya", "Audit internal berkala"],
}


class MockProvider:
    """Mock LLM provider returning canned JSON responses in order."""

    def __init__(self, responses=None, should_fail=False):
        self.responses = list(responses or [])
        self.should_fail = should_fail
        self.prompts = []
        self.schemas = []

    @property
    def name(self):
        return "mock"

    def generate_json(self, prompt, schema):
        self.prompts.append(prompt)
        self.schemas.append(schema)
        if self.should_fail:
            raise Exception("Mock failure")
        return self.responses.pop(0)


@pytest.fixture
def draft_response():
    return copy.deepcopy(DRAFT_RESPONSE)


@pytest.fixture
def tows_response():
    return copy.deepcopy(TOWS_RESPONSE)


@pytest.fixture
def complete_profile():
    from context_wizard.records.types import Profile

    return Profile(
        user_name="Budi Santoso",
        job_title="Manajer Mutu",
        analysis_date="2026-10-17",
        company_name="PT Manufaktur Maju",
        sector="manufaktur",
        unit_name="Departemen Quality Control",
    )


def make_controller(provider, output_dir, profile=None):
    """Build a controller wired to a mock provider."""
    from context_wizard.agents.drafting import DraftingGateway
    from context_wizard.report.exporter import ReportExporter
    from context_wizard.wizard.controller import WizardController

    controller = WizardController(DraftingGateway(provider), ReportExporter(output_dir))
    if profile is not None:
        controller.state.profile = profile
    return controller
