# tests/test_wizard_controller.py
"""Tests for the WizardController."""

import asyncio
import pytest

from conftest import MockProvider, make_controller
from context_wizard.records.types import Category
from context_wizard.wizard.states import WizardStep


@pytest.fixture
def controller_at_analysis(tmp_path, complete_profile, draft_response):
    """Controller that has drafted SWOT/PESTLE and sits on the analysis screen."""
    provider = MockProvider([draft_response])
    controller = make_controller(provider, tmp_path, complete_profile)
    assert asyncio.run(controller.submit_profile())
    return controller, provider


def test_starts_on_profile_with_defaults(tmp_path):
    controller = make_controller(MockProvider(), tmp_path)

    assert controller.step == WizardStep.PROFILE
    assert controller.profile.sector == "manufaktur"
    assert controller.error is None
    assert not controller.is_loading


def test_submit_complete_profile_advances(controller_at_analysis):
    controller, provider = controller_at_analysis

    assert controller.step == WizardStep.VALIDATE_ANALYSIS
    assert len(provider.prompts) == 1
    assert controller.store.texts(Category.THREATS) == [
        "Persaingan harga dari impor", "Kenaikan harga bahan baku",
    ]
    assert not controller.is_loading


def test_submit_profile_blocked_when_unit_blank(tmp_path, complete_profile, draft_response):
    complete_profile.unit_name = ""
    provider = MockProvider([draft_response])
    controller = make_controller(provider, tmp_path, complete_profile)

    assert asyncio.run(controller.submit_profile()) is False
    assert controller.step == WizardStep.PROFILE
    assert provider.prompts == []
    assert controller.error is None


def test_submit_profile_failure_sets_error_and_keeps_state(tmp_path, complete_profile):
    controller = make_controller(MockProvider(should_fail=True), tmp_path, complete_profile)

    assert asyncio.run(controller.submit_profile()) is False
    assert controller.step == WizardStep.PROFILE
    assert controller.error == "Gagal menghasilkan analisis. Silakan coba lagi."
    assert all(controller.store.factors(c) == [] for c in Category)
    assert not controller.is_loading


def test_retry_after_error(tmp_path, complete_profile, draft_response):
    provider = MockProvider([{"not": "a draft"}, draft_response])
    controller = make_controller(provider, tmp_path, complete_profile)

    assert asyncio.run(controller.submit_profile()) is False
    assert controller.error

    controller.clear_error()
    assert controller.error is None
    assert asyncio.run(controller.submit_profile()) is True
    assert controller.step == WizardStep.VALIDATE_ANALYSIS


def test_submit_profile_suppressed_while_loading(tmp_path, complete_profile, draft_response):
    provider = MockProvider([draft_response])
    controller = make_controller(provider, tmp_path, complete_profile)
    controller.state.is_loading = True

    assert asyncio.run(controller.submit_profile()) is False
    assert provider.prompts == []


def test_loading_flag_and_message_during_draft(tmp_path, complete_profile, draft_response):
    from context_wizard.wizard.controller import DRAFT_LOADING_MESSAGE

    seen = {}

    class ObservingGateway:
        async def generate_initial_draft(self, profile):
            seen["loading"] = controller.is_loading
            seen["message"] = controller.state.loading_message
            seen["back_allowed"] = controller.back()
            from context_wizard.agents.schemas import InitialDraft
            return InitialDraft.model_validate(draft_response)

    controller = make_controller(MockProvider(), tmp_path, complete_profile)
    controller.gateway = ObservingGateway()

    asyncio.run(controller.submit_profile())

    assert seen == {"loading": True, "message": DRAFT_LOADING_MESSAGE, "back_allowed": False}
    assert not controller.is_loading


def test_proceed_to_tows(controller_at_analysis, tows_response):
    controller, provider = controller_at_analysis
    provider.responses.append(tows_response)

    assert asyncio.run(controller.proceed_to_tows())

    assert controller.step == WizardStep.VALIDATE_TOWS
    assert len(controller.store.tows) == 6
    assert "Kekuatan: Tenaga kerja terampil, Sertifikasi mutu internal." in provider.prompts[-1]


def test_proceed_to_tows_failure(controller_at_analysis):
    controller, provider = controller_at_analysis
    provider.should_fail = True

    assert asyncio.run(controller.proceed_to_tows()) is False
    assert controller.step == WizardStep.VALIDATE_ANALYSIS
    assert controller.error == "Gagal menyusun strategi TOWS. Silakan coba lagi."
    assert controller.store.tows == []


def test_regenerating_tows_replaces_list(controller_at_analysis, tows_response):
    controller, provider = controller_at_analysis
    second = {
        "so_strategies": ["Baru 1"],
        "st_strategies": ["Baru 2"],
        "wo_strategies": [],
        "wt_strategies": ["Baru 3"],
    }
    provider.responses.extend([tows_response, second])

    asyncio.run(controller.proceed_to_tows())
    controller.back()
    asyncio.run(controller.proceed_to_tows())

    assert len(controller.store.tows) == 3
    assert [s.text for s in controller.store.tows] == ["Baru 1", "Baru 2", "Baru 3"]


def test_back_keeps_data(controller_at_analysis, tows_response):
    controller, provider = controller_at_analysis
    provider.responses.append(tows_response)
    asyncio.run(controller.proceed_to_tows())
    controller.show_report()

    assert controller.back()
    assert controller.step == WizardStep.VALIDATE_TOWS
    assert controller.back()
    assert controller.step == WizardStep.VALIDATE_ANALYSIS
    assert controller.back()
    assert controller.step == WizardStep.PROFILE

    assert len(controller.store.tows) == 6
    assert controller.store.texts(Category.LEGAL) == ["Regulasi SNI wajib"]
    assert controller.profile.company_name == "PT Manufaktur Maju"


def test_back_from_profile_raises(tmp_path):
    from context_wizard.errors import TransitionError

    controller = make_controller(MockProvider(), tmp_path)

    with pytest.raises(TransitionError):
        controller.back()


def test_show_report_only_from_tows(controller_at_analysis):
    from context_wizard.errors import TransitionError

    controller, _ = controller_at_analysis

    with pytest.raises(TransitionError):
        controller.show_report()


def test_restart_from_report(controller_at_analysis, tows_response):
    controller, provider = controller_at_analysis
    provider.responses.append(tows_response)
    asyncio.run(controller.proceed_to_tows())
    controller.show_report()

    controller.restart()

    assert controller.step == WizardStep.PROFILE
    assert controller.profile.company_name == ""
    assert controller.store.tows == []
    assert all(controller.store.factors(c) == [] for c in Category)


def test_restart_only_from_report(controller_at_analysis):
    from context_wizard.errors import TransitionError

    controller, _ = controller_at_analysis

    with pytest.raises(TransitionError):
        controller.restart()


def test_generate_more_appends_external(controller_at_analysis):
    controller, provider = controller_at_analysis
    before = list(controller.store.factors(Category.STRENGTHS))
    provider.responses.append(["New point A", "New point B"])

    assert asyncio.run(controller.generate_more(Category.STRENGTHS))

    factors = controller.store.factors(Category.STRENGTHS)
    assert len(factors) == len(before) + 2
    assert factors[:len(before)] == before
    assert [f.text for f in factors[len(before):]] == ["New point A", "New point B"]
    assert all(f.is_external for f in factors[len(before):])
    assert "Tenaga kerja terampil; Sertifikasi mutu internal" in provider.prompts[-1]
    assert not controller.is_generating(Category.STRENGTHS)


def test_generate_more_failure_keeps_list(controller_at_analysis):
    controller, provider = controller_at_analysis
    before = list(controller.store.factors(Category.LEGAL))
    provider.should_fail = True

    assert asyncio.run(controller.generate_more(Category.LEGAL)) is False
    assert controller.error == "Gagal menghasilkan poin tambahan untuk legal."
    assert controller.store.factors(Category.LEGAL) == before
    assert not controller.is_generating(Category.LEGAL)


def test_generate_more_ignored_while_same_category_busy(controller_at_analysis):
    controller, provider = controller_at_analysis
    controller.state.generating[Category.SOCIAL] = True

    assert asyncio.run(controller.generate_more(Category.SOCIAL)) is False
    assert len(provider.prompts) == 1


def test_generate_more_for_other_categories_run_concurrently(tmp_path, complete_profile):
    class GatedGateway:
        def __init__(self):
            self.gates = {}

        async def generate_more_for_category(self, profile, category, existing_texts):
            await self.gates[category].wait()
            return [f"Baru {category.value}"]

    async def scenario():
        gateway = GatedGateway()
        gateway.gates = {Category.STRENGTHS: asyncio.Event(), Category.ECONOMIC: asyncio.Event()}
        controller = make_controller(MockProvider(), tmp_path, complete_profile)
        controller.gateway = gateway
        controller.state.step = WizardStep.VALIDATE_ANALYSIS

        first = asyncio.create_task(controller.generate_more(Category.STRENGTHS))
        second = asyncio.create_task(controller.generate_more(Category.ECONOMIC))
        await asyncio.sleep(0)

        busy = (
            controller.is_generating(Category.STRENGTHS),
            controller.is_generating(Category.ECONOMIC),
            controller.is_generating(Category.LEGAL),
            controller.is_loading,
        )
        gateway.gates[Category.ECONOMIC].set()
        await second
        still_busy = controller.is_generating(Category.STRENGTHS)
        gateway.gates[Category.STRENGTHS].set()
        await first
        return controller, busy, still_busy

    controller, busy, still_busy = asyncio.run(scenario())

    assert busy == (True, True, False, False)
    assert still_busy is True
    assert controller.store.texts(Category.ECONOMIC) == ["Baru economic"]
    assert controller.store.texts(Category.STRENGTHS) == ["Baru strengths"]


def test_generate_more_resolving_after_redraft_appends_to_new_lists(
    tmp_path, complete_profile, draft_response
):
    """A late generate-more result lands on the lists of a newer full draft."""
    from context_wizard.agents.schemas import InitialDraft

    class RacingGateway:
        def __init__(self):
            self.gate = asyncio.Event()
            self.drafts = 0

        async def generate_initial_draft(self, profile):
            self.drafts += 1
            data = dict(draft_response)
            data["swot"] = dict(draft_response["swot"], strengths=[f"Draf {self.drafts}"])
            return InitialDraft.model_validate(data)

        async def generate_more_for_category(self, profile, category, existing_texts):
            await self.gate.wait()
            return ["Poin terlambat"]

    async def scenario():
        gateway = RacingGateway()
        controller = make_controller(MockProvider(), tmp_path, complete_profile)
        controller.gateway = gateway

        await controller.submit_profile()
        more = asyncio.create_task(controller.generate_more(Category.STRENGTHS))
        await asyncio.sleep(0)

        controller.back()
        await controller.submit_profile()
        gateway.gate.set()
        await more
        return controller

    controller = asyncio.run(scenario())

    factors = controller.store.factors(Category.STRENGTHS)
    assert [f.text for f in factors] == ["Draf 2", "Poin terlambat"]
    # Redraft restarted the counter; the late point continues it
    assert factors[0].id == 0
    assert factors[1].id == 11


def test_editing_delegates_to_store(controller_at_analysis):
    from context_wizard.records.types import ImpactLevel

    controller, _ = controller_at_analysis
    factor = controller.add_factor(Category.WEAKNESSES, "Manual")

    assert controller.update_factor(Category.WEAKNESSES, factor.id, "impact", "Rendah")
    assert controller.store.factors(Category.WEAKNESSES)[-1].impact == ImpactLevel.LOW
    assert controller.delete_factor(Category.WEAKNESSES, factor.id)
    assert controller.add_factor(Category.WEAKNESSES, "  ") is None


def test_export_pdf_from_report(controller_at_analysis, tows_response, tmp_path):
    controller, provider = controller_at_analysis
    provider.responses.append(tows_response)
    asyncio.run(controller.proceed_to_tows())
    controller.show_report()

    path = controller.export_pdf()

    assert path == tmp_path / "Analisis_Konteks_PT_Manufaktur_Maju.pdf"
    assert path.read_bytes().startswith(b"%PDF")
    assert controller.step == WizardStep.REPORT
    assert controller.error is None


def test_export_pdf_without_report_view(controller_at_analysis, tmp_path):
    controller, _ = controller_at_analysis

    assert controller.export_pdf() is None
    assert controller.error == "Elemen laporan tidak ditemukan untuk diekspor."
    assert controller.step == WizardStep.VALIDATE_ANALYSIS
    assert list(tmp_path.glob("*.pdf")) == []


def test_export_pdf_render_failure(controller_at_analysis, tows_response, tmp_path):
    from unittest.mock import patch

    controller, provider = controller_at_analysis
    provider.responses.append(tows_response)
    asyncio.run(controller.proceed_to_tows())
    controller.show_report()

    with patch.object(controller.exporter, "render", side_effect=RuntimeError("boom")):
        assert controller.export_pdf() is None

    assert controller.error == "Gagal membuat file PDF. Silakan coba lagi."
    assert controller.step == WizardStep.REPORT
    assert list(tmp_path.glob("*.pdf")) == []


def test_submit_profile_without_api_key_sets_error(tmp_path, complete_profile, monkeypatch):
    from context_wizard.agents.drafting import DraftingGateway
    from context_wizard.report.exporter import ReportExporter
    from context_wizard.wizard.controller import DRAFT_ERROR, WizardController

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    controller = WizardController(DraftingGateway(), ReportExporter(tmp_path))
    controller.state.profile = complete_profile

    assert asyncio.run(controller.submit_profile()) is False
    assert controller.error == DRAFT_ERROR
    assert controller.step == WizardStep.PROFILE
    assert not controller.is_loading
